import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from sqlalchemy import select
from starlette.middleware.base import BaseHTTPMiddleware

from inventory.config import settings
from inventory.database import Base, engine, SessionLocal
import inventory.models  # noqa: F401  register all models
from inventory.errors import register_exception_handlers
from inventory.models.user import User, UserRole
from inventory.security import hash_password
from inventory.routers import (
    health, auth, items, categories, employees, registry, users,
    issuance, documents, composites, stock, audit_logs, reports,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    if settings.DATABASE_URL.startswith("sqlite:///./data"):
        os.makedirs("data", exist_ok=True)
    os.makedirs(os.path.join(settings.UPLOAD_DIR, "documents"), exist_ok=True)
    Base.metadata.create_all(bind=engine)

    # Create the first admin account if there are no users yet
    db = SessionLocal()
    try:
        if not db.scalar(select(User).limit(1)):
            db.add(User(
                username=settings.FIRST_ADMIN_USER,
                hashed_password=hash_password(settings.FIRST_ADMIN_PASS),
                role=UserRole.admin,
            ))
            db.commit()
            logger.info("Created first admin user: %s", settings.FIRST_ADMIN_USER)
    finally:
        db.close()

    yield


app = FastAPI(
    title="IT Inventory",
    description="Role-based IT asset inventory and issuance tracker",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if settings.APP_ENV == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


app.add_middleware(SecurityHeadersMiddleware)
register_exception_handlers(app)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(items.router)
app.include_router(categories.router)
app.include_router(employees.router)
app.include_router(registry.departments)
app.include_router(registry.designations)
app.include_router(users.router)
app.include_router(issuance.router)
app.include_router(documents.router)
app.include_router(composites.router)
app.include_router(stock.router)
app.include_router(audit_logs.router)
app.include_router(reports.router)
