# keyboard.py
from __future__ import annotations

from debug import Debug

debug = Debug()

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE = len(ALPHABET)

_ALPHA_TO_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


# letter → integer signal
def to_int(letter: str) -> int:
    try:
        return _ALPHA_TO_INDEX[letter]
    except KeyError:
        raise ValueError(f"Invalid character {letter!r}; expected one of A–Z.")


# integer signal → letter
def to_char(signal: int) -> str:
    if not (0 <= signal < SIZE):
        raise ValueError(f"Signal {signal} out of range 0–{SIZE - 1}")
    return ALPHABET[signal]


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Entry/exit point of the signal path: letters in, positions out."""

    alphabet: str = ALPHABET

    def forward(self, letter: str) -> int:
        signal = to_int(letter)
        debug.log("keyboard", f"{letter}->{signal}")
        return signal

    def backward(self, signal: int) -> str:
        letter = to_char(signal)
        debug.log("keyboard", f"{signal}->{letter}")
        return letter

    def __repr__(self) -> str:
        return f"<Keyboard {self.alphabet}>"
