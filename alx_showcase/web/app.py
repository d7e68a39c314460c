"""Web interface for the ALX Showcase classifier."""

import os
import sys
import logging
import traceback
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..core.classifier import RepositoryClassifier
from ..core.config import load_weights
from ..core.detector import classify_all, detect_projects
from ..core.metadata import GitHubRepository, build_project_data

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="ALX Showcase Classifier",
    description="Detect ALX curriculum projects among GitHub repositories",
    version=__version__
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

classifier = RepositoryClassifier(load_weights(os.environ.get("ALX_SHOWCASE_WEIGHTS")))

class RepositoryBatch(BaseModel):
    """A list of GitHub repository payloads."""
    repositories: List[GitHubRepository]

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions to prevent exposing sensitive information."""
    error_id = f"error-{id(exc)}"
    logger.error(f"Unhandled exception [{error_id}]: {str(exc)}")
    logger.error(f"Request path: {request.url.path}")
    logger.error(traceback.format_exc())

    return JSONResponse(
        status_code=500,
        content={
            "status": "error",
            "detail": "An internal server error occurred",
            "error_id": error_id
        }
    )

@app.get("/health")
async def health() -> Dict[str, Any]:
    """Liveness probe."""
    return {"status": "ok", "version": __version__}

@app.post("/classify")
async def classify_repository(repository: GitHubRepository) -> Dict[str, Any]:
    """Classify a single GitHub repository."""
    result = classifier.classify(repository.to_descriptor())
    return {
        "status": "success",
        "repository": repository.name,
        "classification": result.to_dict()
    }

@app.post("/detect")
async def detect(batch: RepositoryBatch) -> Dict[str, Any]:
    """Return the curriculum projects among a batch, most confident first."""
    projects = detect_projects(batch.repositories, classifier)
    return {
        "status": "success",
        "total": len(batch.repositories),
        "projects": [
            {"repository": p.repository.name, "classification": p.result.to_dict()}
            for p in projects
        ]
    }

@app.post("/projects")
async def projects(batch: RepositoryBatch, include_all: bool = False) -> Dict[str, Any]:
    """Build showcase project records for detected curriculum projects."""
    if include_all:
        classified = classify_all(batch.repositories, classifier)
    else:
        classified = detect_projects(batch.repositories, classifier)
    logger.info(f"Generating {len(classified)} showcase project record(s)")
    return {
        "status": "success",
        "projects": [build_project_data(p.repository, p.result) for p in classified]
    }
