"""Tests for the BaseTextProvider contract."""

import pytest

from promotion_ai.models import PromptSpec
from promotion_ai.providers import BaseTextProvider
from tests.conftest import make_descriptor


class EchoProvider(BaseTextProvider):
    async def attempt(self, prompt: PromptSpec, timeout: float) -> str:
        return prompt.text

    async def probe(self, timeout: float) -> str:
        return "ok"


class TestBaseTextProvider:

    def test_attempt_and_probe_are_the_whole_contract(self):
        provider = EchoProvider(make_descriptor("echo"))

        assert provider.name == "echo"
        assert provider.model_name == "echo-model"
        assert provider.has_credential
        assert provider.timeout_seconds == 1.0

    def test_missing_probe_cannot_be_instantiated(self):
        class NoProbe(BaseTextProvider):
            async def attempt(self, prompt, timeout):
                return ""

        with pytest.raises(TypeError):
            NoProbe(make_descriptor("broken"))

    def test_repr_names_provider_and_model(self):
        assert repr(EchoProvider(make_descriptor("echo"))) == "EchoProvider(name='echo', model='echo-model')"

    @pytest.mark.asyncio
    async def test_attempt_returns_text(self):
        provider = EchoProvider(make_descriptor("echo"))
        assert await provider.attempt(PromptSpec("hello"), timeout=1.0) == "hello"
