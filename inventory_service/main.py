# inventory_service/main.py

"""
FastAPI Inventory Service API.
Signed-in users list, create, edit and delete inventory products. Reads are
public; every mutation requires a session obtained from /auth/login.
"""
import logging
import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from .config import CORS_ALLOW_ORIGINS, DB_CONNECT_MAX_RETRIES, DB_CONNECT_RETRY_DELAY_SECONDS
from .db import Base, engine
from .exceptions import InternalError, ServiceError
from .routers import auth, products

# -----------------------------
# Configure Logging
# -----------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Suppress noisy logs from third-party libraries for cleaner output
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)


def create_tables():
    """
    Ensures the database tables exist.
    Retries while the database is unreachable and exits the process if it never comes up.
    """
    for i in range(DB_CONNECT_MAX_RETRIES):
        try:
            logger.info(
                f"Attempting to connect to the database and create tables (attempt {i+1}/{DB_CONNECT_MAX_RETRIES})..."
            )
            Base.metadata.create_all(bind=engine)
            logger.info("Successfully connected to the database and ensured tables exist.")
            return
        except OperationalError as e:
            logger.warning(f"Failed to connect to the database: {e}")
            if i < DB_CONNECT_MAX_RETRIES - 1:
                logger.info(f"Retrying in {DB_CONNECT_RETRY_DELAY_SECONDS} seconds...")
                time.sleep(DB_CONNECT_RETRY_DELAY_SECONDS)
    logger.critical(
        f"Failed to connect to the database after {DB_CONNECT_MAX_RETRIES} attempts. Exiting application."
    )
    sys.exit(1)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    yield


async def service_error_handler(request: Request, exc: ServiceError):
    if isinstance(exc, InternalError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Inventory Service API",
        description="Manages supermarket inventory products",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)

    @app.get("/", status_code=status.HTTP_200_OK, summary="Root endpoint")
    async def read_root():
        """
        Returns a welcome message for the Inventory Service.
        """
        return {"message": "Welcome to the Inventory Service!"}

    @app.get("/health", status_code=status.HTTP_200_OK, summary="Health check endpoint")
    async def health_check():
        """
        A simple health check endpoint to verify the service is running.
        """
        return {"status": "ok", "service": "inventory-service"}

    app.include_router(auth.router)
    app.include_router(products.router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("inventory_service.main:app", host="0.0.0.0", port=8000)
