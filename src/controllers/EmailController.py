from .BaseController import BaseController
from helpers.errors import ValidationError
from typing import List, Optional, Union

import logging
logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "Meeting Summary"

class EmailController(BaseController):
    def __init__(self, email_provider=None, app_settings=None):
        super().__init__(app_settings=app_settings)
        self.email_provider = email_provider

    @staticmethod
    def normalize_recipients(recipients: Union[List[str], str, None]) -> List[str]:
        """Accept a list or a comma separated string; strip and drop blanks."""
        if not recipients:
            return []

        if isinstance(recipients, str):
            recipients = recipients.split(",")

        return [str(recipient).strip() for recipient in recipients if str(recipient).strip()]

    async def send_summary(self, recipients: Union[List[str], str, None],
                           subject: Optional[str], body: Optional[str]) -> dict:
        normalized = self.normalize_recipients(recipients)
        if not normalized or not body:
            raise ValidationError("Recipients and summary are required")

        subject = (subject or "").strip() or DEFAULT_SUBJECT

        try:
            result = await self.email_provider.send_email(
                recipients=normalized,
                subject=subject,
                body=body,
            )
        except Exception as e:
            logger.error(f"Error sending email: {e}")
            raise

        return {
            "message_id": result["message_id"],
            "recipients": result.get("recipients") or normalized,
        }
