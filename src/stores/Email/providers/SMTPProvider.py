from ..EmailInterface import EmailInterface
from ..formatting import format_sender, summary_to_html
from helpers.errors import ConfigurationError, UpstreamError
from email.message import EmailMessage
from email.utils import make_msgid
from typing import List
import asyncio
import smtplib
import logging


class SMTPProvider(EmailInterface):
    """Sends mail through an SMTP relay.

    smtplib is blocking, so delivery runs in a worker thread.
    """

    def __init__(self, host: str, port: int,
                 user: str, password: str,
                 secure: bool = False,
                 from_email: str = "",
                 from_name: str = "",
                 timeout: float = 30.0):

        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.secure = secure
        self.from_email = from_email or user
        self.from_name = from_name
        self.timeout = timeout

        self.logger = logging.getLogger(__name__)

    def build_message(self, recipients: List[str], subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = format_sender(self.from_email, self.from_name)
        msg["To"] = ", ".join(recipients)
        msg["Subject"] = subject

        domain = self.from_email.split("@")[-1] if "@" in self.from_email else None
        msg["Message-ID"] = make_msgid(domain=domain)

        msg.set_content(body)
        msg.add_alternative(summary_to_html(body), subtype="html")
        return msg

    def _deliver(self, msg: EmailMessage, recipients: List[str]):
        smtp_class = smtplib.SMTP_SSL if self.secure else smtplib.SMTP

        with smtp_class(self.host, self.port, timeout=self.timeout) as server:
            if not self.secure:
                server.starttls()
            server.login(self.user, self.password)
            return server.send_message(msg, to_addrs=recipients)

    async def send_email(self, recipients: List[str], subject: str, body: str) -> dict:
        if not self.user or not self.password:
            raise ConfigurationError("SMTP_USER and SMTP_PASS environment variables are required")

        msg = self.build_message(recipients, subject, body)

        try:
            refused = await asyncio.to_thread(self._deliver, msg, recipients)
        except smtplib.SMTPResponseException as e:
            error = e.smtp_error.decode(errors="replace") if isinstance(e.smtp_error, bytes) else str(e.smtp_error)
            self.logger.error(f"SMTP server rejected the message ({e.smtp_code}): {error}")
            raise UpstreamError(f"SMTP error: {error}", code=str(e.smtp_code)) from e
        except smtplib.SMTPRecipientsRefused as e:
            self.logger.error(f"SMTP server refused all recipients: {list(e.recipients)}")
            raise UpstreamError(f"All recipients were refused: {', '.join(e.recipients)}") from e
        except (smtplib.SMTPException, OSError) as e:
            self.logger.error(f"SMTP delivery failed: {e}")
            raise UpstreamError(f"SMTP delivery failed: {e}") from e

        if refused:
            self.logger.warning(f"SMTP server refused some recipients: {list(refused)}")

        accepted = [recipient for recipient in recipients if recipient not in (refused or {})]
        self.logger.info(f"Email {msg['Message-ID']} sent to {len(accepted)} recipient(s)")

        return {
            "message_id": msg["Message-ID"],
            "recipients": accepted,
        }
