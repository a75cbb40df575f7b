"""Public package surface for ccd.

Exports ``main`` for programmatic CLI invocation.
Ranking, storage, and picker logic live in submodules under ``ccd``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
