# catalog.py
from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Optional

from debug import Debug
from rotor_and_reflector import Reflector, Rotor

debug = Debug()


class RotorWiring(NamedTuple):
    wiring: str
    notches: str


# ────────────────────────────────────────────────────────────────────────
#  Wheel database
# ────────────────────────────────────────────────────────────────────────

ROTORS: Mapping[str, RotorWiring] = MappingProxyType({
    # Army / Luftwaffe
    "I":     RotorWiring("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":    RotorWiring("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III":   RotorWiring("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":    RotorWiring("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":     RotorWiring("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    # Kriegsmarine
    "VI":    RotorWiring("JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    "VII":   RotorWiring("NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    "VIII":  RotorWiring("FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
    # M4 fourth position, never steps
    "Beta":  RotorWiring("LEYJVCNIXWPBQMDRTAKZGFUHOS", ""),
    "Gamma": RotorWiring("FSOKANUERHMBTIYCWLQPZXVGJD", ""),
})

# the thin ones only fit the M4
REFLECTORS: Mapping[str, str] = MappingProxyType({
    "A":      "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B":      "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C":      "FVPJIAOYEDRZXWGCTKUQSBNMHL",
    "B-Thin": "ENKQAUYWJICOPBLMDXZVFTHRGS",
    "C-Thin": "RDOBJNTKVEHMLFCWZAXGYIPSUQ",
})


def get_rotor(name: str) -> Optional[Rotor]:
    """New rotor built from catalog entry *name*, or None if there is no such wheel.

    Every call builds its own wheel at offset 0, ring 0, so one session's
    rotation never shows up in another.
    """
    entry = ROTORS.get(name)
    if entry is None:
        debug.log("catalog", f"no rotor named {name!r}")
        return None
    debug.log("catalog", f"rotor {name} issued")
    return Rotor(entry.wiring, entry.notches)


def get_reflector(name: str) -> Optional[Reflector]:
    wiring = REFLECTORS.get(name)
    if wiring is None:
        debug.log("catalog", f"no reflector named {name!r}")
        return None
    debug.log("catalog", f"reflector {name} issued")
    return Reflector(wiring)


def rotor_names() -> List[str]:
    return list(ROTORS)


def reflector_names() -> List[str]:
    return list(REFLECTORS)


__all__ = [
    "RotorWiring",
    "ROTORS",
    "REFLECTORS",
    "get_rotor",
    "get_reflector",
    "rotor_names",
    "reflector_names",
]
