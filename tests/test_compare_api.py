"""Tests for the HTTP surface: /compare, /validate-token, /models, /health."""

import pytest

from llm_compare.gateway.errors import RATE_LIMITED, RateLimitError


class TestCompareEndpoint:
    @pytest.mark.asyncio
    async def test_compare_success(self, client):
        resp = await client.post(
            "/api/v1/compare",
            json={
                "prompt": "a login form",
                "models": [
                    {"provider": "openai", "modelId": "gpt-5.2", "token": "sk-good"},
                    {"provider": "google", "modelId": "gemini-2.5-flash", "token": "AIza-good"},
                ],
            },
        )
        assert resp.status_code == 200
        responses = resp.json()["responses"]
        assert [r["modelId"] for r in responses] == ["gpt-5.2", "gemini-2.5-flash"]
        assert responses[0] == {
            "modelId": "gpt-5.2",
            "content": "<html>gpt-5.2</html>",
            "error": None,
            "latencyMs": responses[0]["latencyMs"],
            "status": "success",
        }
        assert responses[0]["latencyMs"] >= 0

    @pytest.mark.asyncio
    async def test_compare_partial_failure(self, client, anthropic_fake):
        anthropic_fake.responses["claude-sonnet-4-5"] = RateLimitError(RATE_LIMITED, status_code=429)
        resp = await client.post(
            "/api/v1/compare",
            json={
                "prompt": "a pricing table",
                "models": [
                    {"provider": "anthropic", "modelId": "claude-sonnet-4-5", "token": "sk-ant"},
                    {"provider": "openai", "modelId": "gpt-5.2", "token": "sk-good"},
                ],
            },
        )
        assert resp.status_code == 200
        by_model = {r["modelId"]: r for r in resp.json()["responses"]}
        assert by_model["claude-sonnet-4-5"]["status"] == "error"
        assert by_model["claude-sonnet-4-5"]["error"] == RATE_LIMITED
        assert by_model["claude-sonnet-4-5"]["content"] is None
        assert by_model["gpt-5.2"]["status"] == "success"

    @pytest.mark.asyncio
    async def test_tokens_not_echoed(self, client):
        resp = await client.post(
            "/api/v1/compare",
            json={"prompt": "x", "models": [{"provider": "openai", "modelId": "gpt-5.2", "token": "sk-secret-123"}]},
        )
        assert "sk-secret-123" not in resp.text

    @pytest.mark.asyncio
    async def test_blank_prompt_is_400(self, client, openai_fake):
        resp = await client.post(
            "/api/v1/compare",
            json={"prompt": "   ", "models": [{"provider": "openai", "modelId": "gpt-5.2", "token": "sk-good"}]},
        )
        assert resp.status_code == 400
        assert resp.json() == {"detail": "Prompt must not be empty"}
        assert openai_fake.generate_calls == []

    @pytest.mark.asyncio
    async def test_no_models_is_400(self, client):
        resp = await client.post("/api/v1/compare", json={"prompt": "hello", "models": []})
        assert resp.status_code == 400
        assert resp.json() == {"detail": "At least one model must be selected"}

    @pytest.mark.asyncio
    async def test_validation_error_does_not_echo_token(self, client, openai_fake):
        resp = await client.post(
            "/api/v1/compare",
            json={"models": [{"provider": "openai", "modelId": "gpt-5.2", "token": "sk-secret-123"}]},
        )
        assert resp.status_code == 422
        assert "sk-secret-123" not in resp.text
        assert any(err["loc"] == ["body", "prompt"] for err in resp.json()["detail"])
        assert openai_fake.generate_calls == []

    @pytest.mark.asyncio
    async def test_validation_error_in_model_entry_does_not_echo_token(self, client):
        resp = await client.post(
            "/api/v1/compare",
            json={"prompt": "hello", "models": [{"provider": "openai", "token": "sk-secret-456"}]},
        )
        assert resp.status_code == 422
        assert "sk-secret-456" not in resp.text
        assert all("input" not in err and "ctx" not in err for err in resp.json()["detail"])

    @pytest.mark.asyncio
    async def test_unknown_provider_is_rejected_before_dispatch(self, client, openai_fake):
        resp = await client.post(
            "/api/v1/compare",
            json={
                "prompt": "hello",
                "models": [
                    {"provider": "mistral", "modelId": "mistral-large", "token": "k"},
                    {"provider": "openai", "modelId": "gpt-5.2", "token": "sk-good"},
                ],
            },
        )
        assert resp.status_code == 422
        assert openai_fake.generate_calls == []


class TestValidateTokenEndpoint:
    @pytest.mark.asyncio
    async def test_valid(self, client, anthropic_fake):
        resp = await client.post("/api/v1/validate-token", json={"provider": "anthropic", "token": "sk-ant-good"})
        assert resp.status_code == 200
        assert resp.json()["valid"] is True
        assert anthropic_fake.validate_calls == ["sk-ant-good"]

    @pytest.mark.asyncio
    async def test_invalid(self, client):
        resp = await client.post("/api/v1/validate-token", json={"provider": "openai", "token": "sk-bad"})
        assert resp.status_code == 200
        assert resp.json()["valid"] is False

    @pytest.mark.asyncio
    async def test_blank_token(self, client):
        resp = await client.post("/api/v1/validate-token", json={"provider": "openai", "token": ""})
        assert resp.status_code == 400
        assert resp.json() == {"valid": False, "error": "Missing provider or token"}

    @pytest.mark.asyncio
    async def test_unknown_provider(self, client):
        resp = await client.post("/api/v1/validate-token", json={"provider": "mistral", "token": "k"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_provider_does_not_echo_token(self, client, openai_fake):
        resp = await client.post("/api/v1/validate-token", json={"token": "sk-secret-xyz"})
        assert resp.status_code == 422
        assert "sk-secret-xyz" not in resp.text
        assert any(err["loc"] == ["body", "provider"] for err in resp.json()["detail"])
        assert openai_fake.validate_calls == []


class TestCatalogAndHealth:
    @pytest.mark.asyncio
    async def test_models(self, client):
        resp = await client.get("/api/v1/models")
        assert resp.status_code == 200
        data = resp.json()
        assert data["providers"] == ["openai", "anthropic", "google"]
        openai_models = data["models"]["openai"]
        assert {"id": "gpt-5.2", "displayName": "GPT-5.2", "provider": "openai", "isDefaultEnabled": True} in (
            openai_models
        )

    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/api/v1/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "providers": ["openai", "anthropic", "google"]}
