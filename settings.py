# settings.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from catalog import get_rotor
from debug import Debug
from keyboard import ALPHABET, SIZE
from rotor_and_reflector import Rotor

debug = Debug()


@dataclass(slots=True, frozen=True)
class RotorConfig:
    """Initial set-up of one wheel: which one, where it starts, its ring."""

    id: str
    start: str = "A"            # letter showing in the window
    ring: int = 1               # Ringstellung, 1‥26

    def __post_init__(self) -> None:
        if not isinstance(self.start, str) or len(self.start) != 1 or self.start not in ALPHABET:
            raise ValueError(f"Start position {self.start!r} must be one letter A–Z")
        if not isinstance(self.ring, int) or not (1 <= self.ring <= SIZE):
            raise ValueError(f"Ring setting {self.ring} out of range 1–{SIZE}")


def build_rotor(config: RotorConfig) -> Rotor:
    rotor = get_rotor(config.id)
    if rotor is None:
        raise KeyError(f"Unknown rotor {config.id!r}")
    rotor.set_ring(config.ring).set_offset(config.start)
    debug.log("settings", f"{config.id}: start={config.start} ring={config.ring}")
    return rotor


def build_rotors(configs: Iterable[RotorConfig]) -> List[Rotor]:
    """One independent wheel per entry, in the order given."""
    return [build_rotor(cfg) for cfg in configs]
