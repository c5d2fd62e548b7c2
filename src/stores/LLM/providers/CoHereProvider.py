from ..LLMInterface import LLMInterface
from helpers.errors import ConfigurationError, UpstreamError
from cohere.core.api_error import ApiError
import cohere
import httpx
import logging

class CoHereProvider(LLMInterface):

    def __init__(self, api_key: str,
                default_max_output_tokens: int=500,
                default_temperature: float=0.3,
                timeout: float=60.0):

        self.api_key = api_key
        self.default_max_output_tokens = default_max_output_tokens
        self.default_temperature = default_temperature

        self.summarization_model_id = None

        self.client = None
        if api_key:
            self.client = cohere.AsyncClient(api_key=self.api_key, timeout=timeout)

        self.logger = logging.getLogger(__name__)

    async def set_summarization_model(self, summarization_model_id: str):
        self.summarization_model_id = summarization_model_id

    async def _chat_completion(self, user_prompt: str, system_prompt: str, model_id: str,
                               temperature: float = None, max_output_tokens: int = None):
        if not self.client:
            raise ConfigurationError("COHERE_API_KEY environment variable is missing")

        if not model_id:
            raise ConfigurationError("No model provided for chat completion")

        try:
            response = await self.client.chat(
                model=model_id,
                preamble=system_prompt or None,
                message=user_prompt,
                temperature=temperature if temperature is not None else self.default_temperature,
                max_tokens=max_output_tokens or self.default_max_output_tokens,
            )
        except ApiError as e:
            self.logger.error(f"CoHere API returned {e.status_code}: {e.body}")
            raise UpstreamError(f"CoHere API error: {e.body}", status=e.status_code) from e
        except httpx.HTTPError as e:
            self.logger.error(f"Error in chat completion with CoHere: {e}")
            raise UpstreamError(f"CoHere request failed: {e}") from e

        if not response or not response.text:
            self.logger.error("Empty completion received from CoHere")
            raise UpstreamError("No summary content received from the provider")

        return response.text

    async def summarize_text(self, user_prompt: str, system_prompt: str = ""):
        return await self._chat_completion(
            user_prompt=user_prompt,
            system_prompt=system_prompt,
            model_id=self.summarization_model_id,
        )
