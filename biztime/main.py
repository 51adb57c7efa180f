import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.core.db import run_migrations
from biztime.core.errors import BizTimeError
from biztime.core.logging import configure_logging

# Routers
from biztime.routes import companies, industries, invoices

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, error: dict | None = None) -> JSONResponse:
    """The one JSON shape every non-2xx response uses."""
    body = {"message": message, "status": status_code}
    if error:
        body.update(error)
    return JSONResponse(
        status_code=status_code,
        content={"error": body, "message": message},
    )


# ==========================
# Error translators
# ==========================
async def biztime_error_handler(request: Request, exc: BizTimeError):
    return error_response(exc.status, exc.message, exc.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched routes arrive here as a plain 404 "Not Found"
    return error_response(exc.status_code, str(exc.detail))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed input maps to a 500 with the field errors attached
    return error_response(500, "Invalid request", {"detail": jsonable_encoder(exc.errors())})


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)
    logger.error("Database error on %s %s: %s", request.method, request.url.path, message)
    return error_response(500, message, {"type": type(exc).__name__})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, str(exc) or "Internal Server Error")


def create_app() -> FastAPI:
    app = FastAPI(
        title="BizTime API",
        version="1.0.0",
    )

    # ==========================
    # Startup Event
    # ==========================
    @app.on_event("startup")
    def startup_event():
        configure_logging()
        run_migrations()
        logger.info("BizTime API is running")

    # ==========================
    # Routers
    # ==========================
    app.include_router(companies.router, prefix="/companies", tags=["companies"])
    app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
    app.include_router(industries.router, prefix="/industries", tags=["industries"])

    app.add_exception_handler(BizTimeError, biztime_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # ==========================
    # Root Endpoint
    # ==========================
    @app.get("/")
    def root():
        return {
            "service": "biztime-api",
            "status": "running",
            "endpoints": {
                "companies": "/companies",
                "invoices": "/invoices",
                "industries": "/industries",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("biztime.main:app", host="127.0.0.1", port=3000, reload=True)
