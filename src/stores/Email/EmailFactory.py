from .EmailEnums import EmailBackend
from .providers import SMTPProvider, ResendProvider

class EmailFactory:

    def __init__(self, config):
        self.config = config

    def create(self, provider: str):

        if provider == EmailBackend.SMTP.value:
            return SMTPProvider(
                host=self.config.SMTP_HOST,
                port=self.config.SMTP_PORT,
                user=self.config.SMTP_USER,
                password=self.config.SMTP_PASS,
                secure=self.config.SMTP_SECURE,
                from_email=self.config.EMAIL_FROM,
                from_name=self.config.EMAIL_FROM_NAME,
                timeout=self.config.EMAIL_TIMEOUT,
            )

        if provider == EmailBackend.RESEND.value:
            return ResendProvider(
                api_key=self.config.RESEND_API_KEY,
                api_url=self.config.RESEND_API_URL,
                from_email=self.config.EMAIL_FROM,
                from_name=self.config.EMAIL_FROM_NAME,
                timeout=self.config.EMAIL_TIMEOUT,
            )

        return None
