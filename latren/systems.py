"""Service locator giving access to the running game's core systems."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

_SYSTEM_NAMES = (
    "entity_manager",
    "game_window",
    "input_system",
    "renderer",
    "resources",
    "audio_player",
    "physics",
    "time",
    "delta_time",
)


class SystemNotConfiguredError(RuntimeError):
    """Raised when a system is requested before a getter for it exists."""


class Systems:
    """Resolves core systems through replaceable getter callables.

    The known system names are ``entity_manager``, ``game_window``,
    ``input_system``, ``renderer``, ``resources``, ``audio_player``,
    ``physics``, ``time`` and ``delta_time``.
    """

    names = _SYSTEM_NAMES

    def __init__(self) -> None:
        self._game: Any = None
        self._getters: dict[str, Callable[[], Any]] = {}

    @staticmethod
    def _check_name(name: str) -> None:
        if name not in _SYSTEM_NAMES:
            raise ValueError(f"unknown system {name!r}")

    def use_game_instance(self, game: Any) -> None:
        """Adopt ``game`` and resolve every system through it.

        The game is read lazily: ``entity_manager``, ``game_window``,
        ``game_window.input_system``, ``renderer``, ``resources``,
        ``audio_player``, ``physics``, ``time`` and ``delta_time``.
        """
        self._game = game
        self.set_getter("entity_manager", lambda: self.get_game().entity_manager)
        self.set_getter("game_window", lambda: self.get_game().game_window)
        self.set_getter("input_system", lambda: self.get_game().game_window.input_system)
        self.set_getter("renderer", lambda: self.get_game().renderer)
        self.set_getter("resources", lambda: self.get_game().resources)
        self.set_getter("audio_player", lambda: self.get_game().audio_player)
        self.set_getter("physics", lambda: self.get_game().physics)
        self.set_getter("time", lambda: self.get_game().time)
        self.set_getter("delta_time", lambda: self.get_game().delta_time)

    def set_getter(self, name: str, getter: Callable[[], Any]) -> None:
        """Install ``getter`` as the source of system ``name``."""
        self._check_name(name)
        self._getters[name] = getter

    def get(self, name: str) -> Any:
        """Return system ``name`` from its getter."""
        self._check_name(name)
        getter = self._getters.get(name)
        if getter is None:
            message = f"Getter not defined for system {name!r}"
            logger.error(message)
            raise SystemNotConfiguredError(message)
        return getter()

    def get_game(self) -> Any:
        if self._game is None:
            raise SystemNotConfiguredError("No game instance in use")
        return self._game

    def get_time(self) -> float:
        return float(self.get("time"))

    def get_delta_time(self) -> float:
        return float(self.get("delta_time"))