from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from datetime import datetime
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load .env variables
load_dotenv()

# Configure base logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("parcelx")

from parcelx.routers import (
    admins,
    airlines,
    airports,
    auth,
    bookings,
    crypto_wallets,
    dashboard,
    flights,
    notifications,
    shipments,
    users,
)
from parcelx.database import engine, Base, SessionLocal
from parcelx.init_db import create_initial_admin
from parcelx.services.email import email_service
from parcelx.services.payment_verification import BookingUpdateError
from parcelx.services.storage import StorageError
import parcelx.models  # noqa: F401  registers every table on Base.metadata
import uvicorn

# Production schema comes from Alembic; this only fills gaps on a fresh database
Base.metadata.create_all(bind=engine)

logger.info("Checking for an initial super admin...")
db = SessionLocal()
try:
    create_initial_admin(db)
finally:
    db.close()

app = FastAPI(
    title="ParcelX Admin API",
    description="Back-office API for shipments, flight bookings and payment verification",
    version="1.0.0",
)


def _error_emails_enabled() -> bool:
    return os.getenv("ENABLE_ERROR_EMAILS", "false").lower() in {"1", "true", "yes"}


def _configure_email_error_reporting() -> None:
    if not _error_emails_enabled():
        logger.info(
            "Email error reporting disabled (ENABLE_ERROR_EMAILS not set or false)"
        )
        return

    if not email_service.is_configured():
        logger.warning("Email service not configured: missing SMTP settings")
        return

    logger.info("Email error reporting configured successfully")


_configure_email_error_reporting()

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix="/auth", tags=["authentication"])
app.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
app.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
app.include_router(notifications.router, tags=["notifications"])
app.include_router(flights.router, prefix="/flights", tags=["flights"])
app.include_router(airlines.router, prefix="/airlines", tags=["airlines"])
app.include_router(airports.router, prefix="/airports", tags=["airports"])
app.include_router(
    crypto_wallets.router, prefix="/crypto-wallets", tags=["crypto-wallets"]
)
app.include_router(shipments.router, prefix="/shipments", tags=["shipments"])
app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(admins.router, prefix="/admins", tags=["admins"])


@app.get("/")
def read_root():
    return {"message": "Welcome to ParcelX Admin API"}


@app.exception_handler(BookingUpdateError)
async def booking_update_error_handler(request: Request, exc: BookingUpdateError):
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.warning("Storage error | path=%s | %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


# Global unhandled exception handler -> logs ERROR and sends email
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    client = request.client.host if request.client else "unknown"
    logger.error(
        "Unhandled error | path=%s | method=%s | client=%s",
        request.url.path,
        request.method,
        client,
        exc_info=exc,
    )

    if _error_emails_enabled() and email_service.is_configured():
        email_service.send_error_email(
            {
                "path": request.url.path,
                "method": request.method,
                "client": client,
                "user": getattr(request.state, "admin_email", None),
                "exception": exc,
                "timestamp": datetime.utcnow().strftime("%Y-%m-%d %H:%M:%S"),
            }
        )

    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


if __name__ == "__main__":
    uvicorn.run("parcelx.main:app", host="0.0.0.0", port=8000, reload=True)
