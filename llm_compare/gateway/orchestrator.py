"""Comparison Orchestrator — fans one prompt out to several providers.

Main entry point for a side-by-side comparison:
  1. Rejects empty / over-long prompts and empty item lists before dispatch
  2. Resolves each item's adapter via the ProviderRegistry
  3. Calls every adapter concurrently, timing each call on its own
  4. Converts any per-item failure into an error outcome for that item only
  5. Returns one outcome per item, in input order, keyed by model id

Usage:
    orchestrator = ComparisonOrchestrator(default_registry())
    outcomes = await orchestrator.compare(
        "a pricing table",
        [ComparisonRequestItem(provider="openai", model_id="gpt-5.2", credential="sk-...")],
    )
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence

from llm_compare.core.config import settings
from llm_compare.gateway.errors import (
    UNEXPECTED_ERROR,
    ClientInputError,
    ProviderError,
    UnknownProviderError,
)
from llm_compare.gateway.registry import ProviderRegistry
from llm_compare.gateway.system_prompt import SYSTEM_PROMPT
from llm_compare.gateway.types import ComparisonOutcome, ComparisonRequestItem

logger = logging.getLogger(__name__)


class ComparisonOrchestrator:
    """Stateless fan-out over the provider registry.

    Each ``compare`` call is independent; nothing is shared between calls
    except the read-only registry.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        system_prompt: str = SYSTEM_PROMPT,
        max_prompt_length: int | None = None,
    ):
        self.registry = registry
        self.system_prompt = system_prompt
        self.max_prompt_length = settings.max_prompt_length if max_prompt_length is None else max_prompt_length

    def _check_input(self, prompt: str, items: Sequence[ComparisonRequestItem]) -> None:
        if not prompt or not prompt.strip():
            raise ClientInputError("Prompt must not be empty")
        if len(prompt) > self.max_prompt_length:
            raise ClientInputError(f"Prompt exceeds {self.max_prompt_length} characters")
        if not items:
            raise ClientInputError("At least one model must be selected")

    async def _run_item(self, prompt: str, item: ComparisonRequestItem) -> ComparisonOutcome:
        """Execute a single item. Never raises for adapter-level failures."""
        log_extra = {"provider": getattr(item.provider, "value", item.provider), "model_id": item.model_id}
        start = time.monotonic()
        try:
            adapter = self.registry.resolve(item.provider)
            result = await adapter.generate(prompt, self.system_prompt, item.credential, item.model_id)
        except (ProviderError, UnknownProviderError) as e:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            return ComparisonOutcome.failure(item.model_id, str(e), elapsed_ms)
        except Exception:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.exception("Unexpected failure for model=%s", item.model_id, extra=log_extra)
            return ComparisonOutcome.failure(item.model_id, UNEXPECTED_ERROR, elapsed_ms)

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info("model=%s answered in %dms", item.model_id, elapsed_ms, extra=log_extra)
        return ComparisonOutcome.success(item.model_id, result.content, elapsed_ms)

    async def compare(
        self,
        prompt: str,
        items: Sequence[ComparisonRequestItem],
    ) -> list[ComparisonOutcome]:
        """Run every item concurrently and wait for all of them.

        Raises ClientInputError (with no network calls made) for an empty
        prompt or item list. Every other failure is reported per item.
        """
        self._check_input(prompt, items)

        logger.info("Comparing %d models", len(items))
        results = await asyncio.gather(
            *(self._run_item(prompt, item) for item in items),
            return_exceptions=True,
        )

        outcomes: list[ComparisonOutcome] = []
        for item, result in zip(items, results):
            if isinstance(result, ComparisonOutcome):
                outcomes.append(result)
                continue
            # The item task itself died outside the adapter's error handling
            logger.error(
                "Comparison slot for model=%s lost: %r", item.model_id, result, extra={"model_id": item.model_id}
            )
            outcomes.append(ComparisonOutcome.failure(item.model_id, UNEXPECTED_ERROR, 0))

        failed = sum(1 for o in outcomes if o.error is not None)
        logger.info("Comparison finished: %d succeeded, %d failed", len(outcomes) - failed, failed)
        return outcomes


def outcomes_by_model(outcomes: Sequence[ComparisonOutcome]) -> dict[str, ComparisonOutcome]:
    """Key outcomes by model id, the identity callers reconcile cards by."""
    return {o.model_id: o for o in outcomes}
