"""
Outcome of one submission attempt.

Outcome is a closed set: every OutcomeKind has exactly one user-facing
notification in the status reporter.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OutcomeKind(str, Enum):
    """Tag of the Outcome variant"""

    success = "success"
    invalid_input = "invalid_input"
    rate_limited = "rate_limited"
    mail_failed = "mail_failed"
    already_registered = "already_registered"
    save_failed = "save_failed"
    unknown = "unknown"


class GatewayErrorCode(str, Enum):
    """Error codes a gateway may put in its Result"""

    RATE_LIMITED = "RATE_LIMITED"
    MAIL_FAILED = "MAIL_FAILED"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    SAVE_FAILED = "SAVE_FAILED"
    UNKNOWN = "UNKNOWN"


class Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    name: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.success

    @classmethod
    def success(cls, name: str) -> "Outcome":
        return cls(kind=OutcomeKind.success, name=name)

    @classmethod
    def invalid_input(cls, code: str, message: str) -> "Outcome":
        return cls(kind=OutcomeKind.invalid_input, code=code, message=message)

    @classmethod
    def rate_limited(cls) -> "Outcome":
        return cls(kind=OutcomeKind.rate_limited)

    @classmethod
    def mail_failed(cls, message: Optional[str] = None) -> "Outcome":
        return cls(kind=OutcomeKind.mail_failed, message=message)

    @classmethod
    def already_registered(cls) -> "Outcome":
        return cls(kind=OutcomeKind.already_registered)

    @classmethod
    def save_failed(cls, message: Optional[str] = None) -> "Outcome":
        return cls(kind=OutcomeKind.save_failed, message=message)

    @classmethod
    def unknown(cls, message: str) -> "Outcome":
        return cls(kind=OutcomeKind.unknown, message=message)
