from gamingservices.models.payload import PayloadState, StartupPayload
from gamingservices.models.session_context import (
    SessionContext,
    SessionContextHolder,
    get_current_session_context,
    get_default_holder,
    set_current_session_context,
)

__all__ = [
    "PayloadState",
    "SessionContext",
    "SessionContextHolder",
    "StartupPayload",
    "get_current_session_context",
    "get_default_holder",
    "set_current_session_context",
]
