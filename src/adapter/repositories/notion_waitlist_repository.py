"""
Notion-backed waitlist store.

A Notion database has no unique constraint, so uniqueness is enforced here
by querying for the email before creating the page. Two concurrent inserts
for the same email can both pass the query; the SQL backend is the one to
use when that matters.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

import httpx

from src.app.repositories.waitlist_repository import IWaitlistRepository
from src.domain.entities import WaitlistSignup
from src.domain.errors import DuplicateEmailError, StoreRateLimitedError

NAME_PROPERTY = "Name"
EMAIL_PROPERTY = "Email"
CREATED_AT_PROPERTY = "Created At"


def _raise_for_status(response: httpx.Response) -> None:
    if response.status_code == 429:
        raise StoreRateLimitedError("Notion API rate limited the request")
    response.raise_for_status()


def _page_to_signup(page: dict) -> WaitlistSignup:
    properties = page.get("properties", {})
    title = properties.get(NAME_PROPERTY, {}).get("title") or []
    name = "".join(part.get("plain_text") or part.get("text", {}).get("content", "") for part in title)
    created = (properties.get(CREATED_AT_PROPERTY, {}).get("date") or {}).get("start")
    return WaitlistSignup(
        id=UUID(page["id"]),
        name=name,
        email=properties.get(EMAIL_PROPERTY, {}).get("email") or "",
        created_at=datetime.fromisoformat(created or page["created_time"].replace("Z", "+00:00")),
    )


class NotionWaitlistRepository(IWaitlistRepository):
    """Waitlist repository implementation using the Notion REST API"""

    def __init__(self, client: httpx.AsyncClient, database_id: str):
        self.client = client
        self.database_id = database_id

    async def get_by_email(self, email: str) -> Optional[WaitlistSignup]:
        """Get signup by email address"""
        response = await self.client.post(
            f"/databases/{self.database_id}/query",
            json={
                "filter": {"property": EMAIL_PROPERTY, "email": {"equals": email}},
                "page_size": 1,
            },
        )
        _raise_for_status(response)
        results = response.json().get("results") or []
        if not results:
            return None
        return _page_to_signup(results[0])

    async def create(self, signup: WaitlistSignup) -> WaitlistSignup:
        """Create a database page for the signup unless the email is already there"""
        if await self.get_by_email(signup.email) is not None:
            raise DuplicateEmailError(signup.email)

        response = await self.client.post(
            "/pages",
            json={
                "parent": {"database_id": self.database_id},
                "properties": {
                    NAME_PROPERTY: {"title": [{"text": {"content": signup.name}}]},
                    EMAIL_PROPERTY: {"email": signup.email},
                    CREATED_AT_PROPERTY: {"date": {"start": signup.created_at.isoformat()}},
                },
            },
        )
        _raise_for_status(response)
        signup.id = UUID(response.json()["id"])
        return signup
