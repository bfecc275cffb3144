# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = (
    "codec",
    "plugboard",
    "rotor",
    "block",
    "reflector",
    "stepping",
    "encipher",
    "config",
    "generator",
    "benchmark",
)


class Debug:
    _root_configured: bool = False          # class-level guard

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        Component-gated debug channel over the shared ``ESD`` logger.

        The root logger is configured by the first instance only; `log_to`
        adds a UTF-8 file handler next to the console stream.
        """
        if not Debug._root_configured:
            handlers: list[logging.Handler] = [logging.StreamHandler()]
            if log_to:
                handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

            logging.basicConfig(
                level=logging.DEBUG,
                format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                handlers=handlers,
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ESD")
        self.enabled = True

        # everything starts muted; modules opt in while debugging
        self.components: Dict[str, bool] = dict.fromkeys(COMPONENTS, False)

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str, *args: object) -> None:
        """Emit *message* (``%``-style *args*) if *component* is switched on."""
        if self.enabled and self.components.get(component, False):
            self.logger.debug("[%s] " + message, component.upper(), *args)

    def is_on(self, component: str) -> bool:
        return self.enabled and self.components.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        self.components[component] = not self.components[component]

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return self.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"
