from gamingservices.services.payload_extractor import (
    PayloadExtractor,
    PayloadStore,
    get_default_extractor,
    get_payload,
    get_request_id,
    load_from_launch_event,
    load_from_startup_string,
    parse_startup_string,
)

__all__ = [
    "PayloadExtractor",
    "PayloadStore",
    "get_default_extractor",
    "get_payload",
    "get_request_id",
    "load_from_launch_event",
    "load_from_startup_string",
    "parse_startup_string",
]
