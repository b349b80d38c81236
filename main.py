import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.logging_config import setup_logging
from config.settings import quiz_settings
from src.routers import quiz as quiz_router

# Configure logging VERY early
setup_logging(quiz_settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load and validate the question catalog before serving; a malformed catalog stops startup.
    engine = quiz_router.get_quiz_engine()
    logger.info(f"Question catalog version {engine.catalog.version} loaded")
    yield


app = FastAPI(title="Energy Alignment Quiz API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=quiz_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include Routers ---
app.include_router(quiz_router.router, prefix="/api/v1", tags=["quiz"])


@app.get("/health", tags=["Health Check"])
async def health_check():
    """
    Liveness check.
    """
    return {"status": "ok", "message": "Energy Alignment Quiz is running."}


if __name__ == "__main__":
    import uvicorn
    # Better to run with `uvicorn main:app --reload` from the project root directory
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
