"""
Status Reporter

Turns submission outcomes into transient, non-blocking notifications.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from src.domain.validation import INVALID_EMAIL
from .outcome import Outcome, OutcomeKind

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    loading = "loading"
    success = "success"
    error = "error"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str


LOADING_MESSAGE = "Getting you on the waitlist... 🚀"
MISSING_FIELDS_MESSAGE = "Please fill in all fields 😠"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address 😠"

MESSAGES = {
    OutcomeKind.success: "Thank you for joining the waitlist 🎉",
    OutcomeKind.invalid_input: MISSING_FIELDS_MESSAGE,
    OutcomeKind.rate_limited: "You're doing that too much. Please try again later 😅",
    OutcomeKind.mail_failed: "Failed to send email. Please try again 😢",
    OutcomeKind.already_registered: "This email is already registered 😅",
    OutcomeKind.save_failed: "Failed to save your details. Please try again 😢",
    OutcomeKind.unknown: "An unexpected error occurred. Please try again 😢",
}

_missing = set(OutcomeKind) - set(MESSAGES)
if _missing:
    raise RuntimeError(f"No notification copy for outcome kinds: {sorted(k.value for k in _missing)}")


def _log_sink(notification: Notification) -> None:
    if notification.level is NotificationLevel.error:
        logger.warning(notification.message)
    else:
        logger.info(notification.message)


class StatusReporter:
    """Maps every Outcome to exactly one notification and hands it to a sink."""

    def __init__(self, sink: Optional[Callable[[Notification], None]] = None):
        self.sink = sink or _log_sink

    def message_for(self, outcome: Outcome) -> str:
        if outcome.kind is OutcomeKind.invalid_input and outcome.code == INVALID_EMAIL:
            return INVALID_EMAIL_MESSAGE
        return MESSAGES[outcome.kind]

    def report_loading(self) -> Notification:
        notification = Notification(NotificationLevel.loading, LOADING_MESSAGE)
        self.sink(notification)
        return notification

    def report(self, outcome: Outcome) -> Notification:
        level = NotificationLevel.success if outcome.is_success else NotificationLevel.error
        notification = Notification(level, self.message_for(outcome))
        self.sink(notification)
        return notification
