"""FastAPI application entry point."""
import logging
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from media_requests.config import settings
from media_requests.database import Base, SessionLocal, engine

# Import routers
from media_requests.routers import requests, users, catalog, admin

# Import all models so Base.metadata knows about them
from media_requests.models.user import User                 # noqa: F401
from media_requests.models.request import MediaRequest      # noqa: F401
from media_requests.services.seed import seed_sample_data

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Family Media Requests",
    description="Search the TMDB catalog, request movies and TV, and track request status",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(requests.router, prefix="/api/requests", tags=["Requests"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(catalog.router, prefix="/api/tmdb", tags=["Catalog"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode) and optionally seed them."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    if settings.SEED_SAMPLE_DATA:
        db = SessionLocal()
        try:
            seed_sample_data(db)
        finally:
            db.close()
    if not settings.TMDB_API_KEY:
        logger.warning("TMDB_API_KEY is not set; catalog routes will fail")


@app.get("/api/health")
def health_check():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
