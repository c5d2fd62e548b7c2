from .base_responses import HealthResponse
from .data_responses import UploadResponse
from .summary_requests import SummarizeRequest
from .summary_responses import SummaryResponse
from .email_requests import SendEmailRequest
from .email_responses import SendEmailResponse
from .error_responses import ErrorResponse

__all__ = [
    "HealthResponse",
    "UploadResponse",
    "SummarizeRequest", "SummaryResponse",
    "SendEmailRequest", "SendEmailResponse",
    "ErrorResponse"
]
