from pydantic import BaseModel, Field
from typing import List, Optional, Union

class SendEmailRequest(BaseModel):
    recipients: Optional[Union[List[str], str]] = Field(None, description="Recipient addresses, list or comma separated")
    subject: Optional[str] = None
    summary: Optional[str] = Field(None, description="Summary text used as the email body")
