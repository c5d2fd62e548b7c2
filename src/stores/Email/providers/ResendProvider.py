from ..EmailInterface import EmailInterface
from ..formatting import format_sender, summary_to_html
from helpers.errors import ConfigurationError, UpstreamError
from typing import List
import httpx
import logging


class ResendProvider(EmailInterface):
    def __init__(self, api_key: str,
                 api_url: str = "https://api.resend.com/emails",
                 from_email: str = "",
                 from_name: str = "",
                 timeout: float = 30.0,
                 transport: httpx.AsyncBaseTransport = None):

        self.api_key = api_key
        self.api_url = api_url
        self.from_email = from_email
        self.from_name = from_name
        self.timeout = timeout
        self.transport = transport

        self.logger = logging.getLogger(__name__)

    async def send_email(self, recipients: List[str], subject: str, body: str) -> dict:
        if not self.api_key:
            raise ConfigurationError("RESEND_API_KEY environment variable is missing")

        if not self.from_email:
            raise ConfigurationError("EMAIL_FROM environment variable is missing")

        payload = {
            "from": format_sender(self.from_email, self.from_name),
            "to": recipients,
            "subject": subject,
            "text": body,
            "html": summary_to_html(body),
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json=payload,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = self._error_message(e.response)
            self.logger.error(f"Resend rejected the message ({e.response.status_code}): {message}")
            raise UpstreamError(message, status=e.response.status_code) from e
        except httpx.HTTPError as e:
            self.logger.error(f"Resend request failed: {e}")
            raise UpstreamError(f"Email request failed: {e}") from e

        try:
            message_id = response.json().get("id")
        except ValueError:
            message_id = None

        if not message_id:
            raise UpstreamError("No message id received from the email provider")

        self.logger.info(f"Email {message_id} sent to {len(recipients)} recipient(s)")
        return {
            "message_id": message_id,
            "recipients": recipients,
        }

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json().get("message") or response.text
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
