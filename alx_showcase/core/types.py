from enum import Enum
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

class Category(Enum):
    """Curriculum track a repository most likely belongs to."""
    LOW_LEVEL = "low-level"  # C, Unix, shell, memory management
    HIGHER_LEVEL = "higher-level"  # Python, OOP, scripting
    FRONTEND = "frontend"
    BACKEND = "backend"
    DEVOPS = "devops"
    FULLSTACK = "fullstack"  # AirBnB clone and friends
    AI_ML = "ai-ml"
    GENERAL = "general"  # Nothing in the category table matched

class Difficulty(Enum):
    """Suggested difficulty for a showcased project."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

@dataclass(frozen=True)
class RepositoryDescriptor:
    """Normalized repository metadata handed to the classifier."""
    name: str
    description: Optional[str] = None
    topics: FrozenSet[str] = field(default_factory=frozenset)
    primary_language: Optional[str] = None
    size_kb: Optional[int] = None
    is_fork: bool = False
    star_count: int = 0
    fork_count: int = 0

@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one repository."""
    raw_score: float
    confidence: float
    is_match: bool
    category: Category
    suggested_technologies: Tuple[str, ...]
    suggested_difficulty: Difficulty
    matched_features: Tuple[str, ...]

    def to_dict(self) -> dict:
        """Plain-JSON representation used by the CLI and the web API."""
        return {
            "raw_score": self.raw_score,
            "confidence": self.confidence,
            "is_match": self.is_match,
            "category": self.category.value,
            "suggested_technologies": list(self.suggested_technologies),
            "suggested_difficulty": self.suggested_difficulty.value,
            "matched_features": list(self.matched_features),
        }
