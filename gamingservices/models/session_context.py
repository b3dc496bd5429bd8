from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    context_id: str


class SessionContextHolder:
    def __init__(self) -> None:
        self._current: SessionContext | None = None

    @property
    def current(self) -> SessionContext | None:
        return self._current

    def set_current(self, context: SessionContext | None) -> None:
        logger.debug(
            "Session context changed %s -> %s",
            self._current.context_id if self._current else None,
            context.context_id if context else None,
        )
        self._current = context


_default_holder = SessionContextHolder()


def get_default_holder() -> SessionContextHolder:
    return _default_holder


def get_current_session_context() -> SessionContext | None:
    return _default_holder.current


def set_current_session_context(context: SessionContext | None) -> None:
    _default_holder.set_current(context)
