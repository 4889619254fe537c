# debug.py
from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "ENIGMA"
COMPONENTS = ("alphabet", "rotor", "reflector", "stepping", "encode")

_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# silent by default; the host application decides where records go
_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())


class Debug:
    """Per-module switchboard in front of the shared ``ENIGMA`` logger.

    Each module owns one instance and flips its own components on or off.
    Records only go somewhere once the host configures logging, or calls
    :meth:`Debug.configure`.
    """

    _installed: list[logging.Handler] = []     # handlers added by configure()

    def __init__(self) -> None:
        self.logger = _logger
        self.enabled = True        # global switch
        self._active: set[str] = set()

    # ── process-wide output ──────────────────────────────────────
    @classmethod
    def configure(cls, level: int = logging.DEBUG, *, log_to: str | Path | None = None) -> None:
        """Send ENIGMA records to stderr, and to *log_to* as well when given."""
        cls.reset()
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to is not None:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)
        for handler in handlers:
            handler.setFormatter(formatter)
            _logger.addHandler(handler)
        _logger.setLevel(level)
        cls._installed = handlers

    @classmethod
    def reset(cls) -> None:
        """Undo configure(); the NullHandler stays."""
        for handler in cls._installed:
            _logger.removeHandler(handler)
            handler.close()
        cls._installed = []
        _logger.setLevel(logging.NOTSET)

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if self.enabled and component in self._active:
            self.logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        self._active.update(self._require(c) for c in components)

    def disable(self, *components: str) -> None:
        self._active.difference_update(self._require(c) for c in components)

    def toggle(self, component: str) -> None:
        self._active ^= {self._require(component)}

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def status(self) -> dict[str, bool]:
        return {c: c in self._active for c in COMPONENTS}

    @staticmethod
    def _require(component: str) -> str:
        if component not in COMPONENTS:
            raise ValueError(f"No such component: {component!r}")
        return component

    def __repr__(self) -> str:
        active = [c for c in COMPONENTS if c in self._active]
        return f"<Debug enabled={self.enabled} active={active}>"
