"""
Waitlist submission client
"""

from .form import SignupForm
from .gateways import (
    HttpMailDispatchGateway,
    HttpPersistenceGateway,
    IMailDispatchGateway,
    IPersistenceGateway,
)
from .models import SignupRecord, SignupRequest
from .orchestrator import SubmissionOrchestrator, SubmissionState
from .outcome import GatewayErrorCode, Outcome, OutcomeKind
from .status_reporter import Notification, NotificationLevel, StatusReporter

__all__ = [
    "SignupForm",
    "SignupRequest",
    "SignupRecord",
    "IMailDispatchGateway",
    "IPersistenceGateway",
    "HttpMailDispatchGateway",
    "HttpPersistenceGateway",
    "SubmissionOrchestrator",
    "SubmissionState",
    "Outcome",
    "OutcomeKind",
    "GatewayErrorCode",
    "StatusReporter",
    "Notification",
    "NotificationLevel",
]
