import asyncio
from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient

from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_join_waitlist(client: AsyncClient, test_data, count_signups):
    """Successful signup

    Given no signup exists for "ada@example.com"
    When I post name and email to /api/waitlist
    Then a record is created with a server-assigned id and timestamp
    """
    response = await client.post("/api/waitlist", json=test_data.signup("Ada"))

    assert response.status_code == 200
    data = response.json()
    assert exclude_keys(data) == {
        "success": True,
        "message": "Successfully added to waitlist",
        "name": "Ada",
        "email": "ada@example.com",
    }
    assert data["id"]
    assert data["created_at"]
    assert await count_signups("ada@example.com") == 1


@pytest.mark.asyncio
async def test_notion_path_is_an_alias(client: AsyncClient, test_data, count_signups):
    response = await client.post("/api/notion", json=test_data.signup("Grace"))

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert await count_signups("grace@example.com") == 1


@pytest.mark.asyncio
async def test_join_waitlist_existing_email(client: AsyncClient, test_data, count_signups):
    """Email already registered

    Given "ada@example.com" is on the waitlist
    When I sign up again with that email
    Then the request fails with 409 Conflict
    And the store still holds exactly one record for the email
    """
    await client.post("/api/waitlist", json=test_data.signup("Ada"))

    response = await client.post(
        "/api/waitlist", json={"name": "Ada Lovelace", "email": "ada@example.com"}
    )

    assert response.status_code == 409
    assert response.json() == {
        "success": False,
        "error": "Email already registered",
        "code": "EMAIL_ALREADY_REGISTERED",
    }
    assert await count_signups("ada@example.com") == 1


@pytest.mark.asyncio
async def test_email_case_variants_conflict(client: AsyncClient, count_signups):
    await client.post("/api/waitlist", json={"name": "Ada", "email": "ada@example.com"})

    response = await client.post(
        "/api/waitlist", json={"name": "Ada", "email": "ADA@Example.com"}
    )

    assert response.status_code == 409
    assert await count_signups() == 1


@pytest.mark.asyncio
async def test_join_waitlist_missing_fields(client: AsyncClient, test_data, count_signups):
    """Missing required fields

    When name or email is absent or blank
    Then the request fails with 400 and nothing is stored
    """
    for payload in test_data.missing_fields_payloads():
        response = await client.post("/api/waitlist", json=payload)

        assert response.status_code == 400, payload
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Missing required fields"

    assert await count_signups() == 0


@pytest.mark.asyncio
async def test_join_waitlist_malformed_body(client: AsyncClient):
    response = await client.post(
        "/api/waitlist",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"


@pytest.mark.asyncio
async def test_multiple_signups(client: AsyncClient, test_data, count_signups):
    for name in ("Ada", "Bob", "Grace"):
        response = await client.post("/api/waitlist", json=test_data.signup(name))
        assert response.status_code == 200

    assert await count_signups() == 3


@pytest.mark.asyncio
async def test_created_at_keeps_utc_offset(client: AsyncClient, test_data):
    response = await client.post("/api/waitlist", json=test_data.signup("Bob"))

    created_at = datetime.fromisoformat(response.json()["created_at"])
    assert created_at.utcoffset() == timedelta(0)


@pytest.mark.asyncio
async def test_concurrent_signups_same_email(client: AsyncClient, count_signups):
    """Concurrent duplicates

    Given five requests for "ada@example.com" in flight at once
    Then the unique index lets exactly one insert through
    And every other request fails with 409 Conflict
    """
    payload = {"name": "Ada", "email": "ada@example.com"}

    responses = await asyncio.gather(
        *(client.post("/api/waitlist", json=payload) for _ in range(5))
    )

    statuses = sorted(response.status_code for response in responses)
    assert statuses == [200, 409, 409, 409, 409]
    assert await count_signups("ada@example.com") == 1
