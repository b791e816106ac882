from fastapi import APIRouter
from pydantic import BaseModel

from campus_events.api.deps import AppSettings
from campus_events.auth.shared_secret import authenticate
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import AuthenticationRequiredError

router = APIRouter(prefix="/session", tags=["session"])


class SessionIn(BaseModel):
    password: str


class SessionOut(BaseModel):
    creator_id: str


class SessionEnvelope(BaseModel):
    data: SessionOut


@router.post("", response_model=SessionEnvelope)
def create_session(payload: SessionIn, settings: AppSettings):
    creator_id = authenticate(payload.password, settings.event_passwords)
    if creator_id is None:
        raise AuthenticationRequiredError(ErrorCode.INVALID_PASSWORD, "Invalid password")
    return SessionEnvelope(data=SessionOut(creator_id=creator_id))
