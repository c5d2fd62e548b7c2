from enum import Enum

class EmailBackend(Enum):
    SMTP = "smtp"
    RESEND = "resend"
