import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

# Lifespan manager and versioned API router
from inventory.db.lifespan import lifespan
from inventory.api.v1.router import api_router
from inventory.domains.common.exceptions import (
    DeviceNotFoundError,
    DomainError,
    StorageError,
)

logger = logging.getLogger(__name__)

# Create FastAPI app instance using the lifespan manager
app = FastAPI(
    title="Device Inventory API",
    description="API for tracking physical and network devices.",
    version="0.1.0",
    lifespan=lifespan,
)


# --- Exception Handlers ---
@app.exception_handler(DeviceNotFoundError)
async def device_not_found_handler(request: Request, exc: DeviceNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message}
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message}
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"API: storage failure on {request.url.path}: {exc.cause}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": f"Database error: {exc.message}"},
    )


# --- Test Endpoint (Before API v1 Router) ---
@app.get("/ping", tags=["Test"])
async def ping():
    return {"message": "pong"}


# --- Include API Routers ---
app.include_router(api_router, prefix="/api/v1")
logger.info("Included API router v1 at /api/v1.")


# --- Uvicorn Entry Point (for direct run, if needed) ---
if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Uvicorn server directly...")
    uvicorn.run(app, host="0.0.0.0", port=8000)
