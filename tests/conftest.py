"""PyTest configuration and shared test fixtures.

This module provides PyTest configuration, shared fixtures, and test
utilities that are used across multiple test files.
"""

from collections.abc import Callable, Sequence

import pytest

from tfx_auth_core.kv_store import InMemoryKeyValueStore
from tfx_auth_core.prompting import PromptField
from tfx_auth_core.store import KeyValueCredentialStore

TEST_URL = "https://dev.azure.com/contoso"


class FakePrompter:
    """Input prompter returning canned answers and recording each call."""

    def __init__(
        self, answers: dict[str, str] | None = None, error: Exception | None = None
    ) -> None:
        self.answers = answers or {}
        self.error = error
        self.calls: list[list[PromptField]] = []

    async def collect(self, fields: Sequence[PromptField]) -> dict[str, str]:
        self.calls.append(list(fields))
        if self.error is not None:
            raise self.error
        return {f.name: self.answers[f.name] for f in fields if f.name in self.answers}


@pytest.fixture(autouse=True)
def _clean_resolver_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables from leaking into tests."""
    for name in ("TFS_BYPASS_CACHE", "TFX_SERVICE_NAME", "TFX_ACCOUNT_SCOPE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def url() -> str:
    """Target URL used across resolver tests."""
    return TEST_URL


@pytest.fixture
def make_prompter() -> Callable[..., FakePrompter]:
    """Factory for fake prompters."""
    return FakePrompter


@pytest.fixture
def memory_store() -> KeyValueCredentialStore:
    """Credential store backed by a fresh in-memory key-value store."""
    return KeyValueCredentialStore(InMemoryKeyValueStore())
