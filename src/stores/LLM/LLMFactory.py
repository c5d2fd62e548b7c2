from .LLMEnums import LLMModel
from .providers import OpenAIProvider, CoHereProvider, GeminiProvider

class LLMFactory:

    def __init__(self, config):
        self.config = config

    def create(self, provider: str):

        if provider == LLMModel.GROQ.value:
            return OpenAIProvider(
                api_key=self.config.GROQ_API_KEY,
                api_url=self.config.GROQ_API_URL,
                api_key_name="GROQ_API_KEY",
                default_max_output_tokens=self.config.DEFAULT_MAX_OUTPUT_TOKENS,
                default_temperature=self.config.DEFAULT_TEMPERATURE,
                timeout=self.config.LLM_TIMEOUT,
                max_retries=self.config.LLM_MAX_RETRIES,
            )

        if provider == LLMModel.OPENAI.value:
            return OpenAIProvider(
                api_key=self.config.OPENAI_API_KEY,
                api_url=self.config.OPENAI_API_URL or None,
                api_key_name="OPENAI_API_KEY",
                default_max_output_tokens=self.config.DEFAULT_MAX_OUTPUT_TOKENS,
                default_temperature=self.config.DEFAULT_TEMPERATURE,
                timeout=self.config.LLM_TIMEOUT,
                max_retries=self.config.LLM_MAX_RETRIES,
            )

        if provider == LLMModel.COHERE.value:
            return CoHereProvider(
                api_key=self.config.COHERE_API_KEY,
                default_max_output_tokens=self.config.DEFAULT_MAX_OUTPUT_TOKENS,
                default_temperature=self.config.DEFAULT_TEMPERATURE,
                timeout=self.config.LLM_TIMEOUT,
            )

        if provider == LLMModel.GEMINI.value:
            return GeminiProvider(
                api_key=self.config.GEMINI_API_KEY,
                default_max_output_tokens=self.config.DEFAULT_MAX_OUTPUT_TOKENS,
                default_temperature=self.config.DEFAULT_TEMPERATURE,
                timeout=self.config.LLM_TIMEOUT,
            )

        return None
