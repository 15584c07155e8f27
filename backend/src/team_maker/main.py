"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from team_maker.config import settings
from team_maker.api.routes.team_maker import router as team_maker_router
from team_maker.services.team_maker_service import TeamMakerService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: one screen state per process, nothing persisted
    if not hasattr(app.state, "team_maker"):
        app.state.team_maker = TeamMakerService(
            min_players=settings.min_players,
            delay_seconds=settings.team_delay_seconds,
        )
    yield


app = FastAPI(
    title="Cricket Team Maker",
    description="Pick players from the roster and split them into two teams",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "team-maker"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Cricket Team Maker API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(team_maker_router)
