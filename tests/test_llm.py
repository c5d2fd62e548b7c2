"""Summary generation tests.

Covers prompt composition, input validation, the provider factory, and each
provider's request parameters and error mapping. SDK clients are mocked.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest
import pytest_asyncio

from controllers import LLMController
from helpers.config import settings
from helpers.errors import ConfigurationError, UpstreamError, ValidationError
from stores.LLM import LLMFactory
from stores.LLM.LLMInterface import LLMInterface
from stores.LLM.providers import CoHereProvider, GeminiProvider, OpenAIProvider
from stores.LLM.templates import TemplateParser

from conftest import FakeSummarizationProvider


GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"


def _completion(content: str | None) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


# ── Templates ────────────────────────────────────────────────────────────────


def test_template_parser_falls_back_to_default_language():
    parser = TemplateParser(lang="xx", default_lang="en")
    assert parser.lang == "en"
    assert parser.get("summarizer", "system_prompt").startswith("You are a professional meeting summarizer.")


def test_template_parser_unknown_key_returns_none(template_parser):
    assert template_parser.get("summarizer", "missing") is None
    assert template_parser.get("missing_group", "system_prompt") is None


# ── LLMController ────────────────────────────────────────────────────────────


def test_user_prompt_puts_instruction_before_verbatim_transcript(template_parser):
    controller = LLMController(template_parser=template_parser, app_settings=settings())
    transcript = "Alice: budget is $5k.\nBob: ${not a placeholder}"

    system_prompt, user_prompt = controller.build_prompts(transcript, "one sentence")

    assert "professional meeting summarizer" in system_prompt
    assert user_prompt.index('"one sentence"') < user_prompt.index(transcript)
    assert user_prompt.endswith(f"Transcript:\n{transcript}\n\nSummary:")


@pytest.mark.asyncio
@pytest.mark.parametrize("transcript,instruction", [("", "one sentence"), ("text", ""), (None, "x")])
async def test_empty_inputs_never_reach_provider(template_parser, transcript, instruction):
    provider = FakeSummarizationProvider()
    controller = LLMController(summarize_provider=provider, template_parser=template_parser,
                               app_settings=settings())

    with pytest.raises(ValidationError, match="Transcript and custom instruction are required"):
        await controller.summarize_transcript(transcript, instruction)
    assert provider.calls == []


@pytest.mark.asyncio
async def test_whitespace_inputs_are_passed_through(template_parser):
    provider = FakeSummarizationProvider(summary="Nothing was discussed.")
    controller = LLMController(summarize_provider=provider, template_parser=template_parser,
                               app_settings=settings())

    assert await controller.summarize_transcript("   ", "\t") == "Nothing was discussed."
    assert len(provider.calls) == 1


@pytest.mark.asyncio
async def test_summarize_returns_provider_text(template_parser):
    provider = FakeSummarizationProvider(summary="X")
    controller = LLMController(summarize_provider=provider, template_parser=template_parser,
                               app_settings=settings())

    assert await controller.summarize_transcript("hello test", "one sentence") == "X"
    assert len(provider.calls) == 1


# ── Factory ──────────────────────────────────────────────────────────────────


def test_provider_contract_is_model_selection_and_summarization():
    assert LLMInterface.__abstractmethods__ == {"set_summarization_model", "summarize_text"}
    for provider_class in (OpenAIProvider, CoHereProvider, GeminiProvider):
        assert issubclass(provider_class, LLMInterface)
        assert provider_class.__abstractmethods__ == frozenset()


def test_factory_builds_groq_provider():
    config = settings(GROQ_API_KEY="gsk-test")
    provider = LLMFactory(config=config).create("groq")

    assert isinstance(provider, OpenAIProvider)
    assert provider.api_key_name == "GROQ_API_KEY"
    assert str(provider.client.base_url).startswith("https://api.groq.com/openai/v1")
    assert provider.client.max_retries == 0


def test_factory_builds_other_backends():
    config = settings(COHERE_API_KEY="co-test", GEMINI_API_KEY="gm-test", OPENAI_API_KEY="sk-test")
    factory = LLMFactory(config=config)

    assert isinstance(factory.create("openai"), OpenAIProvider)
    assert isinstance(factory.create("cohere"), CoHereProvider)
    assert isinstance(factory.create("gemini"), GeminiProvider)
    assert factory.create("unknown") is None


# ── OpenAI-compatible provider ───────────────────────────────────────────────


@pytest_asyncio.fixture
async def groq_provider() -> OpenAIProvider:
    provider = OpenAIProvider(api_key="gsk-test", api_url="https://api.groq.com/openai/v1",
                              api_key_name="GROQ_API_KEY")
    await provider.set_summarization_model("llama-3.3-70b-versatile")
    provider.client = MagicMock()
    return provider


@pytest.mark.asyncio
async def test_openai_provider_request_parameters(groq_provider):
    groq_provider.client.chat.completions.create = AsyncMock(return_value=_completion("A test."))

    result = await groq_provider.summarize_text(user_prompt="summarize this", system_prompt="be brief")

    assert result == "A test."
    kwargs = groq_provider.client.chat.completions.create.await_args.kwargs
    assert kwargs["model"] == "llama-3.3-70b-versatile"
    assert kwargs["max_tokens"] == 500
    assert kwargs["temperature"] == 0.3
    assert kwargs["messages"] == [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "summarize this"},
    ]


@pytest.mark.asyncio
async def test_openai_provider_missing_key_is_configuration_error():
    provider = OpenAIProvider(api_key="", api_key_name="GROQ_API_KEY")
    await provider.set_summarization_model("llama-3.3-70b-versatile")

    with pytest.raises(ConfigurationError, match="GROQ_API_KEY environment variable is missing"):
        await provider.summarize_text(user_prompt="x")


@pytest.mark.asyncio
async def test_openai_provider_empty_completion_is_upstream_error(groq_provider):
    groq_provider.client.chat.completions.create = AsyncMock(return_value=_completion(None))

    with pytest.raises(UpstreamError, match="No summary content"):
        await groq_provider.summarize_text(user_prompt="x")


@pytest.mark.asyncio
async def test_openai_provider_wraps_status_errors(groq_provider):
    response = httpx.Response(401, request=httpx.Request("POST", GROQ_URL))
    error = openai.AuthenticationError(
        "Invalid API Key",
        response=response,
        body={"message": "Invalid API Key", "code": "invalid_api_key"},
    )
    groq_provider.client.chat.completions.create = AsyncMock(side_effect=error)

    with pytest.raises(UpstreamError) as exc_info:
        await groq_provider.summarize_text(user_prompt="x")

    assert exc_info.value.message == "Invalid API Key"
    assert exc_info.value.status == 401
    assert exc_info.value.code == "invalid_api_key"
    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_openai_provider_wraps_connection_errors(groq_provider):
    error = openai.APIConnectionError(request=httpx.Request("POST", GROQ_URL))
    groq_provider.client.chat.completions.create = AsyncMock(side_effect=error)

    with pytest.raises(UpstreamError) as exc_info:
        await groq_provider.summarize_text(user_prompt="x")

    assert exc_info.value.status is None


# ── CoHere provider ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_cohere_provider_passes_system_prompt_as_preamble():
    provider = CoHereProvider(api_key="co-test")
    await provider.set_summarization_model("command-r")
    provider.client = MagicMock()
    provider.client.chat = AsyncMock(return_value=MagicMock(text="Cohere summary"))

    result = await provider.summarize_text(user_prompt="summarize", system_prompt="be brief")

    assert result == "Cohere summary"
    kwargs = provider.client.chat.await_args.kwargs
    assert kwargs["preamble"] == "be brief"
    assert kwargs["message"] == "summarize"
    assert kwargs["max_tokens"] == 500
    assert kwargs["temperature"] == 0.3


@pytest.mark.asyncio
async def test_cohere_provider_missing_key():
    provider = CoHereProvider(api_key="")
    await provider.set_summarization_model("command-r")

    with pytest.raises(ConfigurationError, match="COHERE_API_KEY"):
        await provider.summarize_text(user_prompt="x")


@pytest.mark.asyncio
async def test_cohere_provider_wraps_transport_errors():
    provider = CoHereProvider(api_key="co-test")
    await provider.set_summarization_model("command-r")
    provider.client = MagicMock()
    provider.client.chat = AsyncMock(side_effect=httpx.ConnectTimeout("timed out"))

    with pytest.raises(UpstreamError, match="CoHere request failed"):
        await provider.summarize_text(user_prompt="x")


# ── Gemini provider ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_gemini_provider_generation_config():
    provider = GeminiProvider(api_key="gm-test")
    await provider.set_summarization_model("gemini-1.5-flash")

    with patch("google.generativeai.GenerativeModel") as MockModel:
        model = MockModel.return_value
        model.generate_content_async = AsyncMock(return_value=MagicMock(text="Gemini summary"))

        result = await provider.summarize_text(user_prompt="summarize", system_prompt="be brief")

    assert result == "Gemini summary"
    assert MockModel.call_args.kwargs["system_instruction"] == "be brief"
    call = model.generate_content_async.await_args
    assert call.args[0] == [{"role": "user", "parts": ["summarize"]}]
    assert call.kwargs["generation_config"] == {"temperature": 0.3, "max_output_tokens": 500}


@pytest.mark.asyncio
async def test_gemini_provider_missing_key():
    provider = GeminiProvider(api_key="")
    await provider.set_summarization_model("gemini-1.5-flash")

    with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
        await provider.summarize_text(user_prompt="x")
