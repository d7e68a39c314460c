"""GitHub repository metadata: validation, normalization and showcase records."""

from datetime import datetime
import re
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .language_detector import primary_language, technologies_from_languages
from .types import Category, ClassificationResult, RepositoryDescriptor

logger = logging.getLogger(__name__)

__all__ = [
    'GitHubRepository',
    'SHOWCASE_CATEGORIES',
    'generate_title',
    'extract_description_from_readme',
    'build_project_data',
]

# Curriculum category -> category used by the showcase project catalog
SHOWCASE_CATEGORIES: Dict[Category, str] = {
    Category.LOW_LEVEL: 'backend',
    Category.HIGHER_LEVEL: 'backend',
    Category.FRONTEND: 'web',
    Category.BACKEND: 'backend',
    Category.DEVOPS: 'devops',
    Category.FULLSTACK: 'web',
    Category.AI_ML: 'ai',
    Category.GENERAL: 'other',
}

class GitHubRepository(BaseModel):
    """A repository object as returned by the GitHub REST API.

    ``languages`` and ``readme`` are not part of the repository payload; the
    caller fills them in when it has fetched the language breakdown or README.
    """
    model_config = ConfigDict(extra='ignore')

    name: str
    description: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    language: Optional[str] = None
    languages: Dict[str, int] = Field(default_factory=dict)
    size: Optional[int] = Field(default=None, ge=0)
    fork: bool = False
    stargazers_count: int = Field(default=0, ge=0)
    forks_count: int = Field(default=0, ge=0)
    html_url: Optional[str] = None
    homepage: Optional[str] = None
    updated_at: Optional[datetime] = None
    readme: Optional[str] = None

    @field_validator('topics', 'languages', mode='before')
    @classmethod
    def _null_as_empty(cls, value: Any, info) -> Any:
        # GitHub sends null for these on some older repositories
        if value is None:
            return [] if info.field_name == 'topics' else {}
        return value

    @field_validator('stargazers_count', 'forks_count', mode='before')
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    def to_descriptor(self) -> RepositoryDescriptor:
        """Normalize into the classifier's input type."""
        language = self.language or primary_language(self.languages)
        return RepositoryDescriptor(
            name=self.name,
            description=self.description,
            topics=frozenset(self.topics),
            primary_language=language,
            size_kb=self.size,
            is_fork=self.fork,
            star_count=self.stargazers_count,
            fork_count=self.forks_count,
        )

def generate_title(repo_name: str) -> str:
    """Turn a repository name into a human-friendly project title."""
    title = re.sub(r'[-_]', ' ', repo_name)
    title = re.sub(r'0x[0-9a-f]+', lambda m: f"{m.group(0).upper()} -", title, flags=re.IGNORECASE)
    title = re.sub(r'\b\w', lambda m: m.group(0).upper(), title)
    return re.sub(r'\s+', ' ', title).strip()

def extract_description_from_readme(readme: Optional[str], max_length: int = 200) -> Optional[str]:
    """Use the first prose line of a README as a description."""
    if not readme:
        return None

    for line in readme.split('\n'):
        line = line.strip()
        if len(line) > 20 and not line.startswith('#') and not line.startswith('*'):
            if len(line) > max_length:
                return line[:max_length] + '...'
            return line
    return None

def build_project_data(repo: GitHubRepository, result: ClassificationResult) -> Dict[str, Any]:
    """Build the showcase project record for a classified repository."""
    description = repo.description or extract_description_from_readme(repo.readme)
    if not description:
        logger.debug(f"No description or README text for '{repo.name}', using default")
        description = f"{repo.name} - ALX Software Engineering project"

    technologies = technologies_from_languages(repo.languages)
    if not technologies:
        technologies = list(result.suggested_technologies)

    return {
        "title": generate_title(repo.name),
        "description": description,
        "technologies": technologies,
        "github_url": repo.html_url,
        "live_url": repo.homepage or "",
        "category": SHOWCASE_CATEGORIES.get(result.category, 'other'),
        "original_repo_name": repo.name,
        "alx_confidence": result.confidence,
        "difficulty": result.suggested_difficulty.value,
        "last_updated": repo.updated_at.isoformat() if repo.updated_at else None,
    }
