import pytest

from src.client import NotificationLevel, Outcome, OutcomeKind, StatusReporter
from src.client.status_reporter import MESSAGES


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def reporter(notifications):
    return StatusReporter(notifications.append)


def test_every_outcome_kind_has_copy():
    assert set(MESSAGES) == set(OutcomeKind)


def test_success_notification(reporter, notifications):
    reporter.report(Outcome.success("Ada"))

    assert len(notifications) == 1
    assert notifications[0].level is NotificationLevel.success
    assert notifications[0].message == "Thank you for joining the waitlist 🎉"


@pytest.mark.parametrize(
    "outcome,message",
    [
        (Outcome.rate_limited(), "You're doing that too much. Please try again later 😅"),
        (Outcome.mail_failed(), "Failed to send email. Please try again 😢"),
        (Outcome.already_registered(), "This email is already registered 😅"),
        (Outcome.save_failed("disk full"), "Failed to save your details. Please try again 😢"),
        (Outcome.unknown("boom"), "An unexpected error occurred. Please try again 😢"),
    ],
)
def test_failure_notifications(reporter, notifications, outcome, message):
    reporter.report(outcome)

    assert notifications[0].level is NotificationLevel.error
    assert notifications[0].message == message


def test_validation_copy_distinguishes_missing_and_invalid(reporter):
    missing = reporter.report(Outcome.invalid_input("MISSING_FIELDS", "Missing required fields"))
    invalid = reporter.report(Outcome.invalid_input("INVALID_EMAIL", "Invalid email address"))

    assert missing.message == "Please fill in all fields 😠"
    assert invalid.message == "Please enter a valid email address 😠"


def test_loading_notification(reporter, notifications):
    reporter.report_loading()

    assert notifications[0].level is NotificationLevel.loading
    assert notifications[0].message == "Getting you on the waitlist... 🚀"


def test_default_sink_logs(caplog):
    with caplog.at_level("INFO"):
        StatusReporter().report(Outcome.already_registered())

    assert "This email is already registered" in caplog.text
