from ..LLMInterface import LLMInterface
from ..LLMEnums import GeminiEnums
from helpers.errors import ConfigurationError, UpstreamError
from google.api_core.exceptions import GoogleAPIError
import google.generativeai as genai
import logging


class GeminiProvider(LLMInterface):
    def __init__(self, api_key: str,
                 default_max_output_tokens: int=500,
                 default_temperature: float=0.3,
                 timeout: float=60.0):

        self.api_key = api_key
        self.default_max_output_tokens = default_max_output_tokens
        self.default_temperature = default_temperature
        self.timeout = timeout

        self.summarization_model_id = None

        self.enums = GeminiEnums

        if api_key:
            genai.configure(api_key=self.api_key)

        self.logger = logging.getLogger(__name__)

    async def set_summarization_model(self, summarization_model_id: str):
        self.summarization_model_id = summarization_model_id

    async def summarize_text(self, user_prompt: str, system_prompt: str = ""):
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY environment variable is missing")

        if not self.summarization_model_id:
            raise ConfigurationError("No model set for summarization with Gemini")

        model = genai.GenerativeModel(
            model_name=self.summarization_model_id,
            system_instruction=system_prompt or None,
        )

        try:
            result = await model.generate_content_async(
                [self.construct_prompt(user_prompt, self.enums.USER.value)],
                generation_config={
                    "temperature": self.default_temperature,
                    "max_output_tokens": self.default_max_output_tokens,
                },
                request_options={"timeout": self.timeout},
            )
        except GoogleAPIError as e:
            self.logger.error(f"Error summarizing text with Gemini: {e}")
            raise UpstreamError(f"Gemini API error: {e}", status=getattr(e, "code", None)) from e

        # result.text raises ValueError when the candidate was blocked or empty
        try:
            text = result.text if result else None
        except ValueError as e:
            self.logger.error(f"Gemini returned no usable candidate: {e}")
            raise UpstreamError("No summary content received from the provider") from e

        if not text:
            self.logger.error("Empty completion received from Gemini")
            raise UpstreamError("No summary content received from the provider")

        return text

    def construct_prompt(self, prompt: str, role: str):
        return {
            "role": role,
            "parts": [prompt]
        }
