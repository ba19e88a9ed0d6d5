import asyncio
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from llm_compare.core.config import settings

# Override settings for tests
settings.app_env = "development"
settings.token_validation_debounce_seconds = 0.05

from llm_compare.gateway.orchestrator import ComparisonOrchestrator  # noqa: E402
from llm_compare.gateway.registry import ProviderRegistry  # noqa: E402
from llm_compare.gateway.types import ProviderCallResult, ProviderId  # noqa: E402
from llm_compare.main import app  # noqa: E402


class FakeAdapter:
    """In-memory adapter: scripted generate() results and credential verdicts.

    ``responses`` maps model id -> content string, ProviderError instance,
    or any other exception to raise. ``valid_tokens`` lists credentials that
    validate successfully.
    """

    def __init__(
        self,
        responses: dict | None = None,
        valid_tokens: set[str] | None = None,
        delay: float = 0.0,
    ):
        self.responses = responses or {}
        self.valid_tokens = valid_tokens or set()
        self.delay = delay
        self.generate_calls: list[tuple[str, str, str, str]] = []
        self.validate_calls: list[str] = []

    async def validate_credential(self, secret: str) -> bool:
        self.validate_calls.append(secret)
        if self.delay:
            await asyncio.sleep(self.delay)
        return secret in self.valid_tokens

    async def generate(self, prompt: str, system_prompt: str, secret: str, model_id: str) -> ProviderCallResult:
        self.generate_calls.append((prompt, system_prompt, secret, model_id))
        if self.delay:
            await asyncio.sleep(self.delay)
        result = self.responses.get(model_id, f"<html>{model_id}</html>")
        if isinstance(result, BaseException):
            raise result
        return ProviderCallResult(content=result)


@pytest.fixture
def make_adapter():
    """Factory for extra FakeAdapter instances inside a test."""
    return FakeAdapter


@pytest.fixture
def openai_fake() -> FakeAdapter:
    return FakeAdapter(valid_tokens={"sk-good"})


@pytest.fixture
def anthropic_fake() -> FakeAdapter:
    return FakeAdapter(valid_tokens={"sk-ant-good"})


@pytest.fixture
def google_fake() -> FakeAdapter:
    return FakeAdapter(valid_tokens={"AIza-good"})


@pytest.fixture
def fake_registry(openai_fake, anthropic_fake, google_fake) -> ProviderRegistry:
    return ProviderRegistry(
        {
            ProviderId.OPENAI: openai_fake,
            ProviderId.ANTHROPIC: anthropic_fake,
            ProviderId.GOOGLE: google_fake,
        }
    )


@pytest.fixture
def orchestrator(fake_registry) -> ComparisonOrchestrator:
    return ComparisonOrchestrator(fake_registry, system_prompt="sys")


@pytest.fixture
async def client(fake_registry) -> AsyncGenerator[AsyncClient, None]:
    app.state.registry = fake_registry
    app.state.orchestrator = ComparisonOrchestrator(fake_registry, system_prompt="sys")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    del app.state.registry
    del app.state.orchestrator

