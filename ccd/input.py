"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, CSI navigation keys, and UTF-8 text input.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\x0e": "CTRL_N",
    b"\x10": "CTRL_P",
    b"\x15": "CTRL_U",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

# ESC [ <n> ~ and ESC [ <n> ; <mod> ~ forms.
_TILDE_KEYS: dict[str, str] = {
    "1": "HOME",
    "7": "HOME",
    "4": "END",
    "8": "END",
    "3": "DELETE",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
}

_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character that starts with ``lead``."""
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = lead
    for _ in range(needed):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _read_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence."""
    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if part in _FINAL_KEYS and not params:
            return _FINAL_KEYS[part]
        if part == b"~":
            break
        if part.isalpha():
            # Modified arrows such as ESC [ 1 ; 2 A.
            return _FINAL_KEYS.get(part, "ESC")
        params += part
        if len(params) > 16:
            return "ESC"

    number, _, modifier = params.decode("ascii", errors="replace").partition(";")
    name = _TILDE_KEYS.get(number)
    if name is None:
        return "ESC"
    if modifier == "2":
        return f"SHIFT_{name}"
    return name


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` on timeout or EOF, ``"ESC"`` for a lone escape or an
    unrecognized sequence, a named token for control and navigation keys,
    and the decoded character otherwise.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    named = _CONTROL_KEYS.get(ch)
    if named is not None:
        return named

    if ch != b"\x1b":
        if ch[0] < 0x20:
            return "CTRL"
        if ch[0] >= 0x80:
            return _read_utf8_tail(fd, ch)
        return ch.decode("ascii", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        # SS3 form used by some terminals for Home/End and arrows.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _FINAL_KEYS.get(final, "ESC")
    _PENDING_BYTES.append(seq)
    return "ESC"
