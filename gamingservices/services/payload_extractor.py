from __future__ import annotations

import json
import logging
import threading
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from gamingservices.models import (
    PayloadState,
    SessionContext,
    SessionContextHolder,
    StartupPayload,
    get_default_holder,
)
from gamingservices.utils import get_mapping, get_string

logger = logging.getLogger(__name__)

KEY_APPLINK_DATA = "al_applink_data"
KEY_EXTRAS = "extras"
KEY_CONTEXT_TOKEN_ID = "context_token_id"
KEY_GAME_REQUEST_ID = "game_request_id"
KEY_PAYLOAD = "payload"


class PayloadStore:
    """Holds the current PayloadState. ``None`` until the first successful load."""

    def __init__(self) -> None:
        self._state: PayloadState | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> PayloadState | None:
        return self._state

    def replace(self, state: PayloadState) -> None:
        with self._lock:
            self._state = state


def parse_startup_string(raw: str) -> PayloadState | None:
    """Parse a cloud launcher startup string.

    Returns the new state, or None if the string is not a JSON object
    carrying a string ``payload``. The failure reason is logged.
    """
    if not isinstance(raw, (str, bytes, bytearray)):
        logger.error("Startup payload must be a JSON string, got %s", type(raw).__name__)
        return None

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        logger.error("Invalid startup payload JSON: %s", exc, exc_info=True)
        return None

    if not isinstance(data, dict):
        logger.error("Startup payload is not a JSON object")
        return None

    try:
        startup = StartupPayload.model_validate(data)
    except ValidationError as exc:
        logger.error("Invalid startup payload: %s", exc, exc_info=True)
        return None

    return startup.to_state()


def read_launch_extras(event: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if event is None:
        return None
    return get_mapping(event, KEY_APPLINK_DATA, KEY_EXTRAS)


class PayloadExtractor:
    def __init__(
        self,
        store: PayloadStore | None = None,
        context_holder: SessionContextHolder | None = None,
    ) -> None:
        self._store = store or PayloadStore()
        self._context_holder = context_holder or get_default_holder()

    @property
    def store(self) -> PayloadStore:
        return self._store

    def load_from_startup_string(self, raw: str) -> None:
        state = parse_startup_string(raw)
        if state is None:
            return
        self._store.replace(state)
        logger.info(
            "Loaded startup payload request_id=%s payload_present=%s",
            state.request_id,
            state.payload is not None,
        )

    def load_from_launch_event(self, event: Mapping[str, Any] | None) -> None:
        extras = read_launch_extras(event)
        if extras is None:
            logger.debug("Launch event carries no app link extras")
            return

        request_id = get_string(extras, KEY_GAME_REQUEST_ID)
        payload = get_string(extras, KEY_PAYLOAD)
        context_token_id = get_string(extras, KEY_CONTEXT_TOKEN_ID)

        if context_token_id is not None:
            self._context_holder.set_current(SessionContext(context_token_id))

        # Extras without request id or payload still reset the current state.
        self._store.replace(PayloadState(request_id=request_id, payload=payload))
        logger.info(
            "Loaded launch event payload request_id=%s payload_present=%s context_token_present=%s",
            request_id,
            payload is not None,
            context_token_id is not None,
        )

    def get_request_id(self) -> str | None:
        state = self._store.state
        if state is None:
            return None
        return state.request_id

    def get_payload(self) -> str | None:
        state = self._store.state
        if state is None:
            return None
        return state.payload


_default_extractor = PayloadExtractor()


def get_default_extractor() -> PayloadExtractor:
    return _default_extractor


def load_from_startup_string(raw: str) -> None:
    _default_extractor.load_from_startup_string(raw)


def load_from_launch_event(event: Mapping[str, Any] | None) -> None:
    _default_extractor.load_from_launch_event(event)


def get_request_id() -> str | None:
    return _default_extractor.get_request_id()


def get_payload() -> str | None:
    return _default_extractor.get_payload()
