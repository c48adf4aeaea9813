from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .core.config import settings
from .core.database import create_db_and_tables, dispose_engine
from .core.exceptions import ValidationError
from .api.routes import api_router
from .middleware.performance import PerformanceMiddleware
from .utils.completion_service import completion_service

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Message sent back when a body cannot be read at all, per endpoint
MALFORMED_BODY_ERRORS = {
    "/log-violation": "Violation type is required",
    "/generate-ai-response": "Prompt is required",
    "/submit-test": "Missing required fields",
}

app = FastAPI(
    title="Certification Platform API",
    description="Proctoring violation log, AI prompt proxy and AI-graded skill tests",
    version=VERSION,
    docs_url="/docs" if settings.environment == "development" else None,
    redoc_url="/redoc" if settings.environment == "development" else None
)

app.add_middleware(
    PerformanceMiddleware,
    slow_request_threshold=settings.slow_request_threshold
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Unreadable request body on {request.url.path}: {exc.errors()}")
    message = MALFORMED_BODY_ERRORS.get(request.url.path, "Invalid request")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.on_event("startup")
async def startup_event():
    logger.info("Starting Certification Platform API...")
    await create_db_and_tables()
    logger.info("Database initialized")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Certification Platform API...")
    await dispose_engine()
    await completion_service.close()


app.include_router(api_router)


@app.get("/")
async def read_root():
    return {
        "message": "Welcome to the Certification Platform API!",
        "version": VERSION,
        "endpoints": [
            "POST /log-violation",
            "GET /violations",
            "POST /generate-ai-response",
            "POST /submit-test",
            "GET /health",
        ]
    }


def run():
    import uvicorn

    logger.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
