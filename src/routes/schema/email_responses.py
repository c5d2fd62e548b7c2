from pydantic import BaseModel
from typing import List

class SendEmailResponse(BaseModel):
    message: str
    messageId: str
    recipients: List[str]
