from __future__ import annotations

from datetime import tzinfo
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from campus_events.core.config import Settings
from campus_events.db import get_db


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_viewer_timezone(request: Request) -> tzinfo | None:
    return get_settings(request).timezone


DBSession = Annotated[Session | None, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]
ViewerTZ = Annotated[tzinfo | None, Depends(get_viewer_timezone)]
