from gamingservices.models import (
    PayloadState,
    SessionContext,
    get_current_session_context,
    set_current_session_context,
)
from gamingservices.services import (
    PayloadExtractor,
    get_payload,
    get_request_id,
    load_from_launch_event,
    load_from_startup_string,
)

__all__ = [
    "PayloadExtractor",
    "PayloadState",
    "SessionContext",
    "get_current_session_context",
    "get_payload",
    "get_request_id",
    "load_from_launch_event",
    "load_from_startup_string",
    "set_current_session_context",
]
