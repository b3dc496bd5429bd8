from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class PayloadState(BaseModel):
    """
    Payload delivered to the game by the platform.

    Fields
    - request_id: id of the game request that referred the user, if any.
    - payload: opaque data string attached to that request, if any.

    A record is never mutated; every successful load builds a new one.
    """

    model_config = ConfigDict(frozen=True)

    request_id: Optional[str] = None
    payload: Optional[str] = None


class StartupPayload(BaseModel):
    """Schema of the JSON startup string passed in by the cloud launcher."""

    model_config = ConfigDict(extra="ignore")

    payload: StrictStr
    game_request_id: str = ""

    @field_validator("game_request_id", mode="before")
    @classmethod
    def _coerce_request_id(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        raise ValueError("game_request_id must be a scalar")

    def to_state(self) -> PayloadState:
        return PayloadState(request_id=self.game_request_id, payload=self.payload)
