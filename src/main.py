from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from routes import base, data, summary, email
from routes.schema import HealthResponse
from controllers import DataController
from stores.LLM import LLMFactory
from stores.LLM.templates import TemplateParser
from stores.Email import EmailFactory
from helpers.config import get_settings
from helpers.responses import error_response
from helpers.middleware import UploadSizeLimitMiddleware
settings = get_settings()

import logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Meeting Summarizer API",
    description="Upload meeting transcripts, summarize them with an LLM and email the result",
    version=settings.APP_VERSION
)

app.add_middleware(
    UploadSizeLimitMiddleware,
    path="/api/upload",
    max_body_size=settings.MAX_FILE_SIZE + settings.UPLOAD_OVERHEAD_BYTES,
    message=DataController(app_settings=settings).too_large_message,
)

# added last so it is outermost; the size guard's 400 gets CORS headers too
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def startup_clients():
    try:
        logger.info("Environment check: " + ", ".join([
            f"GROQ_API_KEY: {'Found' if settings.GROQ_API_KEY else 'Missing'}",
            f"SMTP_USER: {'Found' if settings.SMTP_USER else 'Missing'}",
            f"NODE_ENV: {settings.NODE_ENV}",
        ]))

        # summarization client
        llm_provider_factory = LLMFactory(config=settings)
        app.summarization_client = llm_provider_factory.create(provider=settings.SUMMARIZATION_BACKEND)
        if app.summarization_client is None:
            raise ValueError(f"Unknown SUMMARIZATION_BACKEND: {settings.SUMMARIZATION_BACKEND}")
        await app.summarization_client.set_summarization_model(summarization_model_id=settings.SUMMARIZATION_MODEL_ID)

        # email client
        email_provider_factory = EmailFactory(config=settings)
        app.email_client = email_provider_factory.create(provider=settings.EMAIL_BACKEND)
        if app.email_client is None:
            raise ValueError(f"Unknown EMAIL_BACKEND: {settings.EMAIL_BACKEND}")

        # template parser
        app.template_parser = TemplateParser(lang=settings.PRIMARY_LANGUAGE,
                                            default_lang=settings.DEFAULT_LANGUAGE)

        logger.info("Application startup completed")

    except Exception as e:
        logger.error(f"Error during startup: {e}")
        raise

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return error_response(400, "Invalid request body")

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return error_response(500, "Something went wrong!", exc=exc)

# Health check endpoint
@app.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        service=f"{settings.APP_NAME} API",
        version=settings.APP_VERSION,
        summarization_backend=settings.SUMMARIZATION_BACKEND,
        email_backend=settings.EMAIL_BACKEND,
    )

# Include routers
app.include_router(base.base_router)
app.include_router(data.data_router)
app.include_router(summary.summary_router)
app.include_router(email.email_router)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
