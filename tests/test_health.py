"""
Tests for the /health endpoint and app-level wiring.

Verifies:
  - Returns HTTP 200 with status="ok"
  - Reports whether an OpenAI key is configured, without exposing it
  - Unknown routes still answer in plain text
"""


async def test_health_returns_200(client):
    response = await client.get("/health")
    assert response.status_code == 200


async def test_health_response_schema(client):
    data = (await client.get("/health")).json()

    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"
    assert data["environment"] == "test"
    assert isinstance(data["ai_configured"], bool)


async def test_health_reports_configured_provider(client, fake_openai):
    data = (await client.get("/health")).json()

    assert data["ai_configured"] is True
    assert "sk-test" not in str(data)


async def test_unknown_route_is_plain_text_404(client):
    response = await client.get("/nope")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Not Found"


def test_serverless_handler_exposed():
    from mangum import Mangum

    from cooking_compass.main import handler

    assert isinstance(handler, Mangum)
