"""
Raw terminal input decoding.

Turns bytes read from a cbreak-mode stdin into key tokens ("j", "down",
"return", "escape", ...). Views only ever see tokens.
"""

from typing import List

ESC = "\x1b"

# Bracketed paste markers; everything between them is pasted text, not keys
PASTE_START = "200~"
PASTE_END = ESC + "[201~"

# Final byte of CSI / SS3 sequences for the keys we care about
_ARROWS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_CONTROL = {
    "\r": "return",
    "\n": "return",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl+c",
}


def _scan_sequence(text: str, start: int) -> int:
    """Return the index just past the escape sequence beginning at start."""
    if text[start + 1] == "O":
        return min(start + 3, len(text))

    # CSI: parameter and intermediate bytes, then one final byte in @..~
    i = start + 2
    while i < len(text):
        if "@" <= text[i] <= "~":
            return i + 1
        i += 1
    return i


class KeyDecoder:
    """
    Incremental decoder for one terminal session.

    Keeps track of an open bracketed paste so pasted text arriving over
    several reads is dropped as a whole.
    """

    def __init__(self):
        self.in_paste = False

    def feed(self, data: bytes) -> List[str]:
        """
        Decode a chunk of terminal input into key tokens.

        A lone ESC (or ESC followed by another ESC) is "escape". CSI ("ESC [")
        and SS3 ("ESC O") sequences map to arrow/home/end names; other escape
        sequences are dropped. Other control characters without a name are
        ignored.
        """
        text = data.decode("utf-8", errors="ignore")
        keys: List[str] = []
        i = 0

        while i < len(text):
            if self.in_paste:
                end = text.find(PASTE_END, i)
                if end == -1:
                    break
                self.in_paste = False
                i = end + len(PASTE_END)
                continue

            ch = text[i]

            if ch == ESC:
                nxt = text[i + 1] if i + 1 < len(text) else ""
                if nxt in ("[", "O"):
                    end = _scan_sequence(text, i)
                    body = text[i + 2:end]
                    if nxt == "[" and body == PASTE_START:
                        self.in_paste = True
                    else:
                        final = body[-1:] if end - i > 2 else ""
                        name = _ARROWS.get(final)
                        if name:
                            keys.append(name)
                    i = end
                    continue
                keys.append("escape")
                i += 1
                continue

            if ch in _CONTROL:
                keys.append(_CONTROL[ch])
            elif ch.isprintable():
                keys.append(ch)
            i += 1

        return keys


def decode_keys(data: bytes) -> List[str]:
    """Decode a single self-contained chunk of input."""
    return KeyDecoder().feed(data)
