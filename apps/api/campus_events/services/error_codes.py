from enum import Enum


class ErrorCode(str, Enum):
    MISSING_REQUIRED_FIELDS = "MISSING_REQUIRED_FIELDS"
    INVALID_REQUEST = "INVALID_REQUEST"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    CREATOR_ID_REQUIRED = "CREATOR_ID_REQUIRED"
    NOT_EVENT_CREATOR = "NOT_EVENT_CREATOR"
    DATABASE_NOT_CONFIGURED = "DATABASE_NOT_CONFIGURED"
    INVALID_PASSWORD = "INVALID_PASSWORD"
