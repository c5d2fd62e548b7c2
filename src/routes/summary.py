from fastapi import APIRouter, Depends, Request
from helpers.config import get_settings, settings
from helpers.errors import ValidationError
from helpers.responses import error_response
from controllers import LLMController
from .schema import SummarizeRequest, SummaryResponse, ErrorResponse

import logging
logger = logging.getLogger(__name__)

summary_router = APIRouter(prefix="/api", tags=["Summary"])

@summary_router.post("/summarize", response_model=SummaryResponse,
                     responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def summarize_transcript(
    summary_request: SummarizeRequest,
    request: Request,
    app_settings: settings = Depends(get_settings)
):
    llm_controller = LLMController(
        summarize_provider=request.app.summarization_client,
        template_parser=request.app.template_parser,
        app_settings=app_settings,
    )

    try:
        summary = await llm_controller.summarize_transcript(
            transcript=summary_request.transcript,
            instruction=summary_request.customInstruction,
        )
    except ValidationError as e:
        return error_response(400, str(e))
    except Exception as e:
        logger.error(f"Summarization error: {e}")
        return error_response(500, "Failed to generate summary", details=str(e), exc=e)

    return SummaryResponse(summary=summary)
