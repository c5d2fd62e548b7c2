from fastapi import APIRouter, Depends, Request
from helpers.config import get_settings, settings
from helpers.errors import ValidationError, PayloadTooLargeError
from helpers.responses import error_response
from controllers import DataController
from .schema import UploadResponse, ErrorResponse

import logging
logger = logging.getLogger(__name__)

data_router = APIRouter(prefix="/api", tags=["Data"])

UPLOAD_REQUEST_BODY = {
    "content": {
        "multipart/form-data": {
            "schema": {
                "type": "object",
                "properties": {"transcript": {"type": "string", "format": "binary"}},
                "required": ["transcript"],
            }
        }
    }
}

@data_router.post("/upload", response_model=UploadResponse,
                  responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
                  openapi_extra={"requestBody": UPLOAD_REQUEST_BODY})
async def upload_transcript(
    request: Request,
    app_settings: settings = Depends(get_settings)
):
    # parsed straight from the request stream; nothing is spooled to disk
    data_controller = DataController(app_settings=app_settings)

    try:
        upload = await data_controller.read_upload(
            stream=request.stream(),
            content_type_header=request.headers.get("content-type"),
        )
        if upload is None:
            return error_response(400, "No file uploaded")

        text, filename = data_controller.extract_text(
            content=upload.content,
            content_type=upload.content_type,
            filename=upload.filename,
        )
    except (ValidationError, PayloadTooLargeError) as e:
        logger.warning(f"Upload rejected: {e}")
        return error_response(400, str(e))
    except Exception as e:
        logger.error(f"Error uploading file: {e}")
        return error_response(500, "File upload failed", exc=e)

    logger.info(f"File uploaded successfully: {filename}")
    return UploadResponse(
        message="File uploaded successfully",
        transcript=text,
        filename=filename,
    )
