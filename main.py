"""
Daybook entry point
Starts the FastAPI application serving the productivity views
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from daybook.api import auth, dashboard, events, goals, habits, journal, tasks
from daybook.client.store_client import store_client
from daybook.utils.config import settings
from daybook.utils.errors import MalformedDateError, RecordValidationError
from daybook.utils.logger import logger

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug
)

for module in (auth, dashboard, tasks, goals, journal, events, habits):
    app.include_router(module.router)


@app.exception_handler(RecordValidationError)
async def validation_error_handler(request: Request, exc: RecordValidationError):
    """Input rejected before anything was written"""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(MalformedDateError)
async def malformed_date_handler(request: Request, exc: MalformedDateError):
    """A stored or submitted date could not be parsed"""
    logger.error(f"Malformed date in {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.on_event("startup")
async def startup_event():
    logger.info(f"{settings.app_name} v{settings.app_version} started")
    if not store_client.is_configured():
        logger.warning("STORE_BASE_URL is not set, every view will be empty")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"{settings.app_name} stopped")


@app.get("/")
async def root():
    """Application info"""
    return {
        "app_name": settings.app_name,
        "version": settings.app_version,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "code": 0}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
