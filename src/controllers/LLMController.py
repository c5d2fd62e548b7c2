from .BaseController import BaseController
from helpers.errors import ValidationError

import logging
logger = logging.getLogger(__name__)

class LLMController(BaseController):
    def __init__(self, summarize_provider=None,
                template_parser=None,
                app_settings=None):

        super().__init__(app_settings=app_settings)
        self.summarize_provider = summarize_provider
        self.template_parser = template_parser

    def build_prompts(self, transcript: str, instruction: str):
        """Return (system_prompt, user_prompt) for a summary request."""
        system_prompt = self.template_parser.get("summarizer", "system_prompt")
        user_prompt = self.template_parser.get("summarizer", "footer_prompt", {
            "instruction": instruction,
            "transcript": transcript,
        })
        return system_prompt, user_prompt

    async def summarize_transcript(self, transcript: str, instruction: str) -> str:
        """Summarize a meeting transcript following a caller instruction."""
        if not transcript or not instruction:
            raise ValidationError("Transcript and custom instruction are required")

        logger.info(f"Summarizing transcript of {len(transcript)} characters with instruction: {instruction!r}")

        system_prompt, user_prompt = self.build_prompts(transcript, instruction)

        try:
            summary = await self.summarize_provider.summarize_text(
                user_prompt=user_prompt,
                system_prompt=system_prompt,
            )
        except Exception as e:
            logger.error(f"Error summarizing text: {e}")
            raise

        logger.info(f"Summary generated ({len(summary)} characters)")
        return summary
