"""FastAPI web application for userapi."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from userapi.api import auth, users
from userapi.api.errors import register_error_handlers
from userapi.database.database import SessionLocal, init_db
from userapi.database.seed import seed_admin_user

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def initialize() -> None:
    """Create the schema and seed the admin user. Runs once per process start."""
    try:
        init_db()
        db = SessionLocal()
        try:
            seed_admin_user(db)
        finally:
            db.close()
    except Exception:
        logger.exception("Database initialization failed")
        raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    initialize()
    yield


# Initialize FastAPI app
app = FastAPI(
    title="userapi",
    description="User management API with JWT bearer authentication",
    version=VERSION,
    lifespan=lifespan,
)

register_error_handlers(app)

app.include_router(auth.router)
app.include_router(users.router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}
