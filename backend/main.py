"""
API entry point for branchfill.
Run: uvicorn main:app --reload --port 8000
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env from backend/, the repository root or cwd before reading settings
_backend_dir = Path(__file__).resolve().parent
load_dotenv(_backend_dir / ".env")
load_dotenv(_backend_dir.parent / ".env")
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from branchfill.api.branching import router as branching_router
from branchfill.settings import load_app_settings

settings = load_app_settings()
logging.getLogger("branchfill").setLevel(settings.log_level)

app = FastAPI(
    title="branchfill API",
    description="Branching Poisson-disk sampling: vein/lightning-like segment patterns.",
    version="0.1.0",
)

# CORS: a browser frontend on another port calls this API directly.
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(branching_router, prefix="/api/branching", tags=["branching"])


@app.get("/health")
def health():
    """Liveness check (CI/CD, Docker)."""
    return {"status": "ok"}
