"""Token Validation State Machine — debounced, cancellable credential checks.

One machine per credential field:

    IDLE --edit--> VALIDATING --check done--> VALID | INVALID
      ^                |                        |
      +----- clear ----+------------------------+

Every edit bumps a sequence number. A check only applies its result if its
sequence number is still the latest one, so a slow response for an old
value can never overwrite the state of a newer value, whatever order the
network answers in.

Usage:
    machine = TokenValidationMachine(registry, "openai", on_status=render)
    machine.on_credential_changed("sk-")   # -> VALIDATING right away
    ...
    machine.on_credential_changed("sk-ant-", provider="anthropic")  # switch and re-check
    machine.on_credential_changed("")      # -> IDLE, pending check cancelled
    machine.close()                        # field unmounted
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from llm_compare.core.config import settings
from llm_compare.gateway.errors import UnknownProviderError
from llm_compare.gateway.registry import ProviderRegistry
from llm_compare.gateway.types import ProviderId, ValidationStatus

logger = logging.getLogger(__name__)


class TokenValidationMachine:
    """Per-field credential validation lifecycle.

    The debounce timer and the in-flight request are a single asyncio task
    owned by this instance, so cancelling it discards both. Must be driven
    from inside a running event loop.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        provider: ProviderId | str,
        *,
        debounce_seconds: float | None = None,
        on_status: Callable[[ValidationStatus], None] | None = None,
    ):
        self.registry = registry
        self.provider = provider
        self.debounce_seconds = (
            settings.token_validation_debounce_seconds if debounce_seconds is None else debounce_seconds
        )
        self._on_status = on_status
        self._status = ValidationStatus.IDLE
        self._secret = ""
        self._seq = 0
        self._task: asyncio.Task | None = None

    @property
    def status(self) -> ValidationStatus:
        return self._status

    def _set_status(self, status: ValidationStatus) -> None:
        if status == self._status:
            return
        self._status = status
        if self._on_status is not None:
            self._on_status(status)

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def on_credential_changed(self, secret: str, provider: ProviderId | str | None = None) -> ValidationStatus:
        """Feed a new field value; returns the immediate status.

        ``provider`` switches the field to another provider in the same edit.
        """
        if provider is not None:
            self.provider = provider
        self._secret = secret
        self._seq += 1
        self._cancel_pending()

        if not secret.strip():
            self._set_status(ValidationStatus.IDLE)
            return self._status

        self._set_status(ValidationStatus.VALIDATING)
        self._task = asyncio.get_running_loop().create_task(self._check(self._seq, secret))
        self._task.add_done_callback(self._log_check_failure)
        return self._status

    def set_provider(self, provider: ProviderId | str) -> ValidationStatus:
        """Switch provider; the current value is re-validated against it."""
        return self.on_credential_changed(self._secret, provider=provider)

    def _log_check_failure(self, task: asyncio.Task) -> None:
        # Nobody awaits the check task, so its exceptions surface only here
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "Credential check for %s failed: %r",
                getattr(self.provider, "value", self.provider),
                exc,
                exc_info=exc,
            )

    async def _check(self, seq: int, secret: str) -> None:
        await asyncio.sleep(self.debounce_seconds)

        try:
            adapter = self.registry.resolve(self.provider)
        except UnknownProviderError as e:
            logger.warning("Credential check skipped: %s", e)
            valid = False
        else:
            valid = await adapter.validate_credential(secret)

        if seq != self._seq:
            logger.debug("Discarding stale credential check #%d (latest #%d)", seq, self._seq)
            return
        self._set_status(ValidationStatus.VALID if valid else ValidationStatus.INVALID)

    async def wait_idle(self) -> ValidationStatus:
        """Wait until no check is scheduled or in flight; return the settled status."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        return self._status

    def close(self) -> None:
        """Drop any pending or in-flight check (owning field went away)."""
        self._seq += 1
        self._cancel_pending()
