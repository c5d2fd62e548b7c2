from .SMTPProvider import SMTPProvider
from .ResendProvider import ResendProvider
