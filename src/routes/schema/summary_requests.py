from pydantic import BaseModel, Field
from typing import Optional

class SummarizeRequest(BaseModel):
    transcript: Optional[str] = Field(None, description="Transcript text returned by the upload endpoint")
    customInstruction: Optional[str] = Field(None, description="How the summary should be written")
