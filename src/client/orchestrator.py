"""
Submission Orchestrator

Runs one signup attempt: validate, send the confirmation email, then persist.
Persistence is only attempted after the email went out. Every attempt
resolves to exactly one Outcome; submit() never raises.

Note: because the email is sent first, a SaveFailed outcome means the user
received a confirmation but has no stored record.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from libs.result import Error
from src.domain.validation import validate_signup
from .form import SignupForm
from .gateways import IMailDispatchGateway, IPersistenceGateway
from .outcome import GatewayErrorCode, Outcome
from .status_reporter import StatusReporter

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    idle = "idle"
    validating = "validating"
    sending_mail = "sending_mail"
    persisting = "persisting"
    resolved = "resolved"


def _mail_outcome(error: Error) -> Outcome:
    if error.code == GatewayErrorCode.RATE_LIMITED.value:
        return Outcome.rate_limited()
    elif error.code == GatewayErrorCode.MAIL_FAILED.value:
        return Outcome.mail_failed(error.message)
    return Outcome.unknown(error.message)


def _persistence_outcome(error: Error) -> Outcome:
    if error.code == GatewayErrorCode.ALREADY_REGISTERED.value:
        return Outcome.already_registered()
    elif error.code == GatewayErrorCode.RATE_LIMITED.value:
        return Outcome.rate_limited()
    elif error.code == GatewayErrorCode.SAVE_FAILED.value:
        return Outcome.save_failed(error.message)
    return Outcome.unknown(error.message)


class SubmissionOrchestrator:
    """
    State machine: idle -> validating -> sending_mail -> persisting -> resolved.

    No state is revisited within one attempt. The form's loading flag is set
    on entering sending_mail and cleared on every exit path. Form fields are
    cleared only on success.
    """

    def __init__(
        self,
        form: SignupForm,
        mail_gateway: IMailDispatchGateway,
        persistence_gateway: IPersistenceGateway,
        reporter: Optional[StatusReporter] = None,
        on_transition: Optional[Callable[[SubmissionState, SignupForm], None]] = None,
    ):
        self.form = form
        self.mail_gateway = mail_gateway
        self.persistence_gateway = persistence_gateway
        self.reporter = reporter or StatusReporter()
        self.on_transition = on_transition
        self.state = SubmissionState.idle
        self.outcome: Optional[Outcome] = None

    def _enter(self, state: SubmissionState) -> None:
        self.state = state
        if self.on_transition is not None:
            try:
                self.on_transition(state, self.form)
            except Exception:
                logger.exception(f"Transition listener failed on {state.value}")

    def _notify(self, report, *args) -> None:
        """Notification faults are logged; they never change the outcome."""
        try:
            report(*args)
        except Exception:
            logger.exception("Status reporter failed")

    async def submit(self) -> Outcome:
        self.state = SubmissionState.idle
        self.outcome = None

        self._enter(SubmissionState.validating)
        validation = validate_signup(self.form.name, self.form.email)
        if validation.is_err():
            error = validation.error
            return self._resolve(Outcome.invalid_input(error.code, error.message))

        request = self.form.to_request()
        self.form.loading = True
        try:
            self._notify(self.reporter.report_loading)
            outcome = await self._dispatch(request)
        except Exception as exc:
            logger.exception("Waitlist submission failed unexpectedly")
            outcome = Outcome.unknown(str(exc) or exc.__class__.__name__)
        finally:
            self.form.loading = False

        return self._resolve(outcome)

    async def _dispatch(self, request) -> Outcome:
        self._enter(SubmissionState.sending_mail)
        mail_result = await self.mail_gateway.send_confirmation(request)
        if mail_result.is_err():
            return _mail_outcome(mail_result.error)

        self._enter(SubmissionState.persisting)
        save_result = await self.persistence_gateway.save_signup(request)
        if save_result.is_err():
            return _persistence_outcome(save_result.error)

        logger.info(f"Waitlist signup stored for {save_result.value.email}")
        return Outcome.success(request.name)

    def _resolve(self, outcome: Outcome) -> Outcome:
        if outcome.is_success:
            self.form.clear()
        self.outcome = outcome
        self._enter(SubmissionState.resolved)
        self._notify(self.reporter.report, outcome)
        return outcome
