from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from planrisk.api.estimation import router as estimation_router
from planrisk.config.settings import settings
from planrisk.core.logger import setup_logger
from planrisk.estimation.errors import EstimationInputError

setup_logger(
    level=settings.log_level,
    log_file=settings.log_file,
    serialize=settings.log_json,
)

app = FastAPI(title="planrisk", description="Project risk and schedule estimation")

app.include_router(estimation_router)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _format_validation_errors(exc)
    logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(EstimationInputError)
async def handle_input_error(request: Request, exc: EstimationInputError) -> JSONResponse:
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests and turn unexpected failures into an error object."""
    logger.debug(f"Request: {request.method} {request.url.path}")
    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception(f"Error in {request.method} {request.url.path}: {e}")
        return JSONResponse(status_code=500, content={"error": str(e) or "Unknown error occurred"})
    logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
    return response


# Added last so it wraps every response, 500s included; OPTIONS pre-flight never reaches the estimators
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info("FastAPI application initialized")
