# rotor_and_reflector.py
from __future__ import annotations

from copy import deepcopy
from typing import Iterable

from debug import Debug
from keyboard import ALPHABET, SIZE, to_char, to_int

debug = Debug()


class Rotor:
    """A wired wheel whose substitution shifts as it turns.

    ``sequence`` and ``notches`` are fixed once built; ``offset`` is the
    only thing that changes while a message is being enciphered, and
    ``ring`` is set up once before that.
    """

    def __init__(self, wiring: str, notches: Iterable[str] = "") -> None:
        if len(wiring) != SIZE or sorted(wiring) != sorted(ALPHABET):
            raise ValueError("wiring must be a permutation of A–Z")

        notch_set = frozenset(notches)
        if not notch_set <= set(ALPHABET):
            raise ValueError("Notch characters must be in A–Z")

        self.sequence = wiring
        self.notches = notch_set

        # integer lookup tables
        self._fwd = [to_int(c) for c in wiring]
        self._rev = [wiring.index(c) for c in ALPHABET]

        self._offset = 0
        self._ring = 0

    # kept in 0‥25 whatever is assigned
    @property
    def offset(self) -> int:
        return self._offset

    @offset.setter
    def offset(self, value: int) -> None:
        self._offset = value % SIZE

    @property
    def ring(self) -> int:
        return self._ring

    @ring.setter
    def ring(self, value: int) -> None:
        self._ring = value % SIZE

    # ── ring & offset helpers ─────────────────────────────────────
    def set_ring(self, ring: int) -> "Rotor":
        """Ring-stellung as printed on the wheel, 1 (A) to 26 (Z)."""
        if not (1 <= ring <= SIZE):
            raise ValueError(f"Ring setting {ring} out of range 1–{SIZE}")
        self.ring = ring - 1
        return self

    def set_offset(self, letter: str) -> "Rotor":
        """Turn the wheel so *letter* shows in the window."""
        self.offset = to_int(letter)
        return self

    # ── stepping --------------------------------------------------
    def rotate(self, steps: int = 1) -> bool:
        """Advance the wheel and report whether it now sits on a notch."""
        self.offset += steps
        hit = self.at_notch
        debug.log("stepping", f"Rotor offset {self.offset}, notch_hit={hit}")
        return hit

    @property
    def at_notch(self) -> bool:
        return ALPHABET[self.offset] in self.notches

    # ── signal paths ---------------------------------------------
    def _enter(self, sig: int) -> int:
        return (sig - self.ring + self.offset) % SIZE

    def _leave(self, sig: int) -> int:
        return (sig + self.ring - self.offset) % SIZE

    def forward(self, sig: int) -> int:
        out = self._leave(self._fwd[self._enter(sig)])
        debug.log("rotor", f"fwd {sig}->{out} (offset={self.offset}, ring={self.ring})")
        return out

    def backward(self, sig: int) -> int:
        out = self._leave(self._rev[self._enter(sig)])
        debug.log("rotor", f"bwd {sig}->{out} (offset={self.offset}, ring={self.ring})")
        return out

    def step(self, letter: str, invert: bool = False) -> str:
        """Send *letter* through the wheel.

        ``invert=False`` is the path from the keyboard toward the
        reflector, ``invert=True`` the way back. Rotor state is untouched.
        """
        sig = to_int(letter)
        return to_char(self.backward(sig) if invert else self.forward(sig))

    # ── niceties --------------------------------------------------
    def copy(self) -> "Rotor":
        return deepcopy(self)

    def __repr__(self) -> str:
        notches = "".join(sorted(self.notches))
        return f"<Rotor {self.sequence} notches={notches!r} offset={self.offset} ring={self.ring}>"


class Reflector:
    """Fixed pairwise swap that turns the signal around."""

    def __init__(self, wiring: str) -> None:
        if len(wiring) != SIZE or sorted(wiring) != sorted(ALPHABET):
            raise ValueError("Reflector wiring must be a permutation of A–Z")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = to_int(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ValueError("Reflector wiring must be an involution with no fixed points")

        self.sequence = wiring
        self._map = [to_int(c) for c in wiring]

    def reflect_signal(self, sig: int) -> int:
        out = self._map[sig]
        debug.log("reflector", f"{sig}->{out}")
        return out

    def reflect(self, letter: str) -> str:
        return to_char(self.reflect_signal(to_int(letter)))

    def copy(self) -> "Reflector":
        return deepcopy(self)

    def __repr__(self) -> str:
        return f"<Reflector {self.sequence}>"
