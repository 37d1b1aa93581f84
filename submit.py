"""Submit one waitlist signup from the command line.

    python submit.py "Ada" ada@example.com --api-url http://localhost:8000/api
"""

import argparse
import asyncio
import logging
import sys

import httpx

from config import ApplicationConfig
from src.client import (
    HttpMailDispatchGateway,
    HttpPersistenceGateway,
    Notification,
    SignupForm,
    StatusReporter,
    SubmissionOrchestrator,
)


def print_notification(notification: Notification) -> None:
    print(notification.message)


async def run(name: str, email: str, api_url: str) -> int:
    form = SignupForm(name=name, email=email)
    async with httpx.AsyncClient(
        base_url=api_url, timeout=ApplicationConfig.HTTP_TIMEOUT
    ) as client:
        orchestrator = SubmissionOrchestrator(
            form,
            HttpMailDispatchGateway(client),
            HttpPersistenceGateway(client),
            StatusReporter(print_notification),
        )
        outcome = await orchestrator.submit()
    return 0 if outcome.is_success else 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Join the waitlist")
    parser.add_argument("name")
    parser.add_argument("email")
    parser.add_argument("--api-url", default=ApplicationConfig.WAITLIST_API_URL)
    args = parser.parse_args(argv)

    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL.upper())
    return asyncio.run(run(args.name, args.email, args.api_url))


if __name__ == "__main__":
    sys.exit(main())
