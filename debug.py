# debug.py
from __future__ import annotations
import logging
from typing import Dict

# one switch per stage of the signal path, plus set-up
COMPONENTS = ("keyboard", "rotor", "reflector", "stepping", "catalog", "settings")

logger = logging.getLogger("ENIGMA")


class Debug:
    """Per-module trace switches over the shared ``ENIGMA`` logger.

    Each module keeps its own instance, so turning on ``stepping`` in
    ``rotor_and_reflector`` leaves the catalog quiet. Handlers and levels
    are left to whoever runs the code.
    """

    def __init__(self) -> None:
        self.enabled = True        # global switch
        self.components: Dict[str, bool] = {c: False for c in COMPONENTS}

    def log(self, component: str, message: str) -> None:
        if self.enabled and self.components.get(component, False):
            logger.debug("[%s] %s", component.upper(), message)

    def enable(self, *components: str) -> None:
        self._set(components, True)

    def disable(self, *components: str) -> None:
        self._set(components, False)

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        return self.components.copy()

    def _set(self, components: tuple[str, ...], state: bool) -> None:
        unknown = [c for c in components if c not in self.components]
        if unknown:
            raise ValueError(f"No such component: {unknown[0]!r}")
        for c in components:
            self.components[c] = state
