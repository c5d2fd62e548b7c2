from fastapi import APIRouter, Depends
from helpers.config import get_settings, settings

base_router = APIRouter()

SERVICE_ENDPOINTS = {
    "upload": "POST /api/upload",
    "summarize": "POST /api/summarize",
    "sendEmail": "POST /api/send-email",
}

@base_router.get("/")
async def service_info(app_settings: settings = Depends(get_settings)):
    return {
        "message": f"{app_settings.APP_NAME} {app_settings.APP_VERSION} is ready to summarize meeting transcripts",
        "endpoints": SERVICE_ENDPOINTS,
    }
