from fastapi import APIRouter, Depends, Request
from helpers.config import get_settings, settings
from helpers.errors import ValidationError
from helpers.responses import error_response
from controllers import EmailController
from .schema import SendEmailRequest, SendEmailResponse, ErrorResponse

import logging
logger = logging.getLogger(__name__)

email_router = APIRouter(prefix="/api", tags=["Email"])

@email_router.post("/send-email", response_model=SendEmailResponse,
                   responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def send_summary_email(
    email_request: SendEmailRequest,
    request: Request,
    app_settings: settings = Depends(get_settings)
):
    email_controller = EmailController(
        email_provider=request.app.email_client,
        app_settings=app_settings,
    )

    try:
        result = await email_controller.send_summary(
            recipients=email_request.recipients,
            subject=email_request.subject,
            body=email_request.summary,
        )
    except ValidationError as e:
        return error_response(400, str(e))
    except Exception as e:
        logger.error(f"Email sending error: {e}")
        return error_response(500, str(e), exc=e)

    return SendEmailResponse(
        message="Email sent successfully",
        messageId=result["message_id"],
        recipients=result["recipients"],
    )
