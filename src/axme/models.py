from typing import Optional

from pydantic import BaseModel, ConfigDict


class RequestOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    idempotency_key: Optional[str] = None
    trace_id: Optional[str] = None
    timeout: Optional[float] = None


class _Payload(BaseModel):
    # Unknown fields are forwarded to the server as-is.
    model_config = ConfigDict(extra="allow")


class RegisterNickRequest(_Payload):
    nick: str
    display_name: Optional[str] = None
    owner_agent: Optional[str] = None


class RenameNickRequest(_Payload):
    owner_agent: str
    nick: str


class UpdateUserProfileRequest(_Payload):
    owner_agent: str
    display_name: Optional[str] = None
