import logging

from libs.result import Error, Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import WaitlistSignup
from src.domain.errors import DuplicateEmailError, StoreRateLimitedError
from .dtos import JoinWaitlistCommand, JoinWaitlistResponse

logger = logging.getLogger(__name__)

EMAIL_ALREADY_REGISTERED = "EMAIL_ALREADY_REGISTERED"
RATE_LIMITED = "RATE_LIMITED"
SAVE_FAILED = "SAVE_FAILED"


class JoinWaitlistUseCase:
    """
    Join Waitlist Use Case

    Command/Response Pattern:
    - Input: JoinWaitlistCommand
    - Output: Result[JoinWaitlistResponse]

    Business Logic:
    1. Normalize email (strip, lower-case) so case variants share one key
    2. Insert exactly once; the store enforces email uniqueness
    3. Map store conflict to EMAIL_ALREADY_REGISTERED
    4. Map store throttling to RATE_LIMITED
    5. Map anything else to SAVE_FAILED with the underlying message

    No retry is attempted here; retries are a caller concern.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: JoinWaitlistCommand) -> Result[JoinWaitlistResponse]:
        email = command.email.strip().lower()
        signup = WaitlistSignup(name=command.name.strip(), email=email)

        async with self.uow:
            try:
                signup = await self.uow.signups.create(signup)
                await self.uow.commit()
            except DuplicateEmailError:
                logger.info(f"Waitlist signup rejected, email already registered: {email}")
                return Return.err(
                    Error(EMAIL_ALREADY_REGISTERED, "Email already registered")
                )
            except StoreRateLimitedError:
                logger.warning("Waitlist store is rate limiting inserts")
                return Return.err(Error(RATE_LIMITED, "Too many requests"))
            except Exception as exc:
                logger.exception(f"Waitlist insert failed for {email}")
                return Return.err(Error(SAVE_FAILED, str(exc) or "Unknown error"))

        logger.info(f"Waitlist signup stored: {signup.id}")
        return Return.ok(
            JoinWaitlistResponse(
                id=str(signup.id),
                name=signup.name,
                email=signup.email,
                created_at=signup.created_at,
            )
        )
