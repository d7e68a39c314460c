"""Batch detection of curriculum projects among a user's repositories."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional
import logging

from .classifier import RepositoryClassifier
from .metadata import GitHubRepository
from .types import ClassificationResult

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

@dataclass(frozen=True)
class DetectedProject:
    """A repository paired with its classification."""
    repository: GitHubRepository
    result: ClassificationResult

def _updated_key(repo: GitHubRepository) -> datetime:
    updated = repo.updated_at
    if updated is None:
        return _EPOCH
    if updated.tzinfo is None:
        return updated.replace(tzinfo=timezone.utc)
    return updated

def classify_all(repositories: Iterable[GitHubRepository],
                 classifier: Optional[RepositoryClassifier] = None) -> List[DetectedProject]:
    """Classify every repository, preserving input order."""
    classifier = classifier or RepositoryClassifier()
    return [DetectedProject(repo, classifier.classify(repo.to_descriptor())) for repo in repositories]

def detect_projects(repositories: Iterable[GitHubRepository],
                    classifier: Optional[RepositoryClassifier] = None) -> List[DetectedProject]:
    """Keep curriculum matches, most confident first, then most recently updated."""
    classified = classify_all(repositories, classifier)
    matches = [project for project in classified if project.result.is_match]
    logger.info(f"Detected {len(matches)} curriculum project(s) out of {len(classified)} repositories")

    # Two stable passes: recency first, then confidence
    matches.sort(key=lambda p: _updated_key(p.repository), reverse=True)
    matches.sort(key=lambda p: p.result.confidence, reverse=True)
    return matches
