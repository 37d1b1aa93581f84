import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_send_mail(client: AsyncClient, mail_sender):
    """Confirmation email is handed to the mail provider"""
    response = await client.post(
        "/api/mail", json={"firstname": "Ada", "email": "ada@example.com"}
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Email sent", "id": "msg_1"}
    assert len(mail_sender.sent) == 1
    assert mail_sender.sent[0].to == "ada@example.com"
    assert "Hi Ada," in mail_sender.sent[0].html


@pytest.mark.asyncio
async def test_send_mail_rate_limited(client: AsyncClient, mail_sender):
    mail_sender.fail_status = 429

    response = await client.post(
        "/api/mail", json={"firstname": "Bob", "email": "bob@example.com"}
    )

    assert response.status_code == 429
    assert response.json()["code"] == "RATE_LIMITED"


@pytest.mark.asyncio
async def test_send_mail_provider_failure(client: AsyncClient, mail_sender):
    mail_sender.fail_status = 503

    response = await client.post(
        "/api/mail", json={"firstname": "Bob", "email": "bob@example.com"}
    )

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "MAIL_FAILED"


@pytest.mark.asyncio
async def test_send_mail_missing_fields(client: AsyncClient, mail_sender):
    response = await client.post("/api/mail", json={"email": "ada@example.com"})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"
    assert mail_sender.sent == []
