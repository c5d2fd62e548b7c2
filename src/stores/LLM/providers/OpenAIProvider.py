from openai import AsyncOpenAI, APIError, APIStatusError
from ..LLMInterface import LLMInterface
from ..LLMEnums import OpenAIEnums
from helpers.errors import ConfigurationError, UpstreamError
import logging


class OpenAIProvider(LLMInterface):
    """Chat completion against any OpenAI-compatible endpoint (OpenAI, Groq)."""

    def __init__(self,
                api_key: str,
                api_url: str = None,
                api_key_name: str = "OPENAI_API_KEY",
                default_max_output_tokens: int = 500,
                default_temperature: float = 0.3,
                timeout: float = 60.0,
                max_retries: int = 0):

        self.api_key = api_key
        self.api_url = api_url
        self.api_key_name = api_key_name
        self.default_max_output_tokens = default_max_output_tokens
        self.default_temperature = default_temperature

        self.summarization_model_id = None

        self.enums = OpenAIEnums

        self.client = None
        if api_key:
            self.client = AsyncOpenAI(api_key=api_key, base_url=api_url,
                                      timeout=timeout, max_retries=max_retries)

        self.logger = logging.getLogger(__name__)

    async def set_summarization_model(self, summarization_model_id: str):
        self.summarization_model_id = summarization_model_id

    async def _chat_completion(self, messages: list, model_id: str,
                               temperature: float = None, max_output_tokens: int = None):
        if self.client is None:
            raise ConfigurationError(f"{self.api_key_name} environment variable is missing")

        if not model_id:
            raise ConfigurationError("No model provided for chat completion")

        try:
            response = await self.client.chat.completions.create(
                model=model_id,
                messages=messages,
                max_tokens=max_output_tokens or self.default_max_output_tokens,
                temperature=temperature if temperature is not None else self.default_temperature,
            )
        except APIStatusError as e:
            self.logger.error(f"OpenAI-compatible API returned {e.status_code}: {e.message}")
            raise UpstreamError(e.message, status=e.status_code, code=e.code) from e
        except APIError as e:
            self.logger.error(f"Error in chat completion: {e.message}")
            raise UpstreamError(e.message, code=e.code) from e

        if not response or not response.choices or not response.choices[0].message \
                or not response.choices[0].message.content:
            self.logger.error("Empty completion received from provider")
            raise UpstreamError("No summary content received from the provider")

        return response.choices[0].message.content

    async def summarize_text(self, user_prompt: str, system_prompt: str = ""):
        messages = []
        if system_prompt:
            messages.append(self.construct_prompt(system_prompt, self.enums.SYSTEM.value))
        messages.append(self.construct_prompt(user_prompt, self.enums.USER.value))

        return await self._chat_completion(
            messages=messages,
            model_id=self.summarization_model_id,
        )

    def construct_prompt(self, prompt: str, role: str):
        return {
            "role": role,
            "content": prompt
        }
