"""
Client gateways to the waitlist service.

Each gateway makes a single HTTP call and converts every failure, transport
faults included, into a Result error. Nothing is raised past the gateway.
"""

import logging
from abc import ABC, abstractmethod

import httpx

from libs.result import Error, Result, Return
from .models import SignupRecord, SignupRequest
from .outcome import GatewayErrorCode

logger = logging.getLogger(__name__)


class IMailDispatchGateway(ABC):
    """Asks the service to send the confirmation email"""

    @abstractmethod
    async def send_confirmation(self, request: SignupRequest) -> Result[None]:
        pass


class IPersistenceGateway(ABC):
    """Asks the service to store the signup"""

    @abstractmethod
    async def save_signup(self, request: SignupRequest) -> Result[SignupRecord]:
        pass


def _error_text(response: httpx.Response):
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("error")
    return None


class HttpMailDispatchGateway(IMailDispatchGateway):
    """POST {firstname, email} to the mail endpoint"""

    def __init__(self, client: httpx.AsyncClient, path: str = "/mail"):
        self.client = client
        self.path = path

    async def send_confirmation(self, request: SignupRequest) -> Result[None]:
        try:
            response = await self.client.post(
                self.path, json={"firstname": request.name, "email": request.email}
            )
        except httpx.HTTPError as exc:
            logger.error(f"Mail dispatch transport failure: {exc!r}")
            return Return.err(Error(GatewayErrorCode.UNKNOWN.value, str(exc) or repr(exc)))

        if response.is_success:
            return Return.ok()
        if response.status_code == 429:
            return Return.err(Error(GatewayErrorCode.RATE_LIMITED.value, "Rate limited"))
        return Return.err(
            Error(
                GatewayErrorCode.MAIL_FAILED.value,
                _error_text(response) or f"Mail endpoint responded {response.status_code}",
            )
        )


class HttpPersistenceGateway(IPersistenceGateway):
    """POST {name, email} to the waitlist endpoint"""

    def __init__(self, client: httpx.AsyncClient, path: str = "/waitlist"):
        self.client = client
        self.path = path

    async def save_signup(self, request: SignupRequest) -> Result[SignupRecord]:
        try:
            response = await self.client.post(
                self.path,
                json={"name": request.name, "email": request.email},
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as exc:
            logger.error(f"Persistence transport failure: {exc!r}")
            return Return.err(Error(GatewayErrorCode.UNKNOWN.value, str(exc) or repr(exc)))

        if response.is_success:
            try:
                return Return.ok(SignupRecord.model_validate(response.json()))
            except ValueError as exc:
                return Return.err(Error(GatewayErrorCode.UNKNOWN.value, str(exc)))
        if response.status_code == 409:
            return Return.err(
                Error(GatewayErrorCode.ALREADY_REGISTERED.value, "Email already registered")
            )
        if response.status_code == 429:
            return Return.err(Error(GatewayErrorCode.RATE_LIMITED.value, "Rate limited"))
        return Return.err(
            Error(GatewayErrorCode.SAVE_FAILED.value, _error_text(response) or "save_failed")
        )
