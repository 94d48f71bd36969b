from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging

from string_analyzer import config
from string_analyzer.errors import StringAnalyzerError
from string_analyzer.routes import router
from string_analyzer.store import StringStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

INVALID_BODY = 'Invalid request body or missing "value" field'
INVALID_VALUE = 'Invalid data type for "value" (must be string)'
INVALID_QUERY = "Invalid query parameter values or types"


def register_exception_handlers(app: FastAPI) -> None:
    # Domain errors raised by the store, parser and routes
    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message}
        )

    # Validation error handler
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if any(error["type"] == "json_invalid" for error in errors):
            status_code, message = status.HTTP_400_BAD_REQUEST, INVALID_BODY
        elif any(error["loc"] and error["loc"][0] == "body" for error in errors):
            status_code, message = status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_VALUE
        else:
            status_code, message = status.HTTP_400_BAD_REQUEST, INVALID_QUERY

        logger.info(f"Rejected {request.method} {request.url.path}: {message}")
        return JSONResponse(
            status_code=status_code,
            content={"error": message}
        )

    # HTTPException handler (unknown routes, wrong methods)
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"}
        )


def create_app(store: Optional[StringStore] = None) -> FastAPI:
    """Build the application around its own store (a fresh in-memory one by default)."""
    app = FastAPI(
        title="String Analyzer Service",
        description="Analyze, store and filter strings by their computed properties",
        version="1.0.0"
    )
    app.state.store = store if store is not None else StringStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": "String Analyzer Service",
            "version": "1.0.0",
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string"
            }
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    app.include_router(router, tags=["strings"])
    logger.info("String Analyzer Service initialized")
    return app


app = create_app()


def run() -> None:
    import uvicorn
    logger.info(f"Starting server on port {config.PORT}")
    uvicorn.run("string_analyzer.main:app", host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    run()
