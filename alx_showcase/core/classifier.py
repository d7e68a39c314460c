"""Curriculum project detection and classification."""

from typing import Iterable, List, Optional, Set, Tuple
import logging

from .config import DEFAULT_WEIGHTS, ScoringWeights
from .patterns import (
    CATEGORY_RULES,
    DESCRIPTION_KEYWORDS,
    LANGUAGE_BONUSES,
    NAME_PATTERNS,
    SMALL_REPOSITORY_KB,
    TECHNOLOGY_RULES,
    TOPIC_PATTERNS,
)
from .types import Category, ClassificationResult, Difficulty, RepositoryDescriptor

logger = logging.getLogger(__name__)

class FeatureTrace:
    """Ordered, duplicate-free list of rule descriptions."""

    def __init__(self) -> None:
        self._items: List[str] = []
        self._seen: Set[str] = set()

    def add(self, feature: str) -> None:
        if feature not in self._seen:
            self._seen.add(feature)
            self._items.append(feature)

    def as_tuple(self) -> Tuple[str, ...]:
        return tuple(self._items)

def score_name(name: str, weights: ScoringWeights, trace: FeatureTrace) -> float:
    """Score the repository name against the curriculum naming conventions."""
    for pattern in NAME_PATTERNS:
        if pattern.search(name):
            trace.add(f"Name matches curriculum pattern: {pattern.pattern}")
            logger.debug(f"Name '{name}' matched pattern '{pattern.pattern}'")
            return weights.name_pattern_bonus
    return 0.0

def score_topics(topics: Iterable[str], weights: ScoringWeights, trace: FeatureTrace) -> float:
    """Each curriculum topic adds its own bonus."""
    score = 0.0
    for topic in sorted(topics):
        if topic.lower() in TOPIC_PATTERNS:
            score += weights.topic_bonus
            trace.add(f"Topic: {topic}")
    return score

def score_description(description: str, weights: ScoringWeights, trace: FeatureTrace) -> float:
    """Each curriculum keyword contained in the description adds a bonus."""
    score = 0.0
    lower_desc = description.lower()
    for keyword in DESCRIPTION_KEYWORDS:
        if keyword in lower_desc:
            score += weights.description_keyword_bonus
            trace.add(f"Description contains: {keyword}")
    return score

def score_characteristics(descriptor: RepositoryDescriptor, weights: ScoringWeights,
                          trace: FeatureTrace) -> float:
    """Language, size and originality bonuses. These stack."""
    score = 0.0

    language = (descriptor.primary_language or '').lower()
    for lang, attribute in LANGUAGE_BONUSES:
        if language == lang:
            score += getattr(weights, attribute)
            trace.add(f"Primary language: {descriptor.primary_language}")
            break

    if descriptor.size_kb is not None and descriptor.size_kb < SMALL_REPOSITORY_KB:
        score += weights.small_repository_bonus
        trace.add(f"Small repository (< {SMALL_REPOSITORY_KB} KB)")

    if not descriptor.is_fork:
        score += weights.original_work_bonus
        trace.add("Original work (not a fork)")

    return score

def determine_category(name: str, description: str, topics: Iterable[str]) -> Category:
    """Pick the first category in table order whose keywords appear."""
    haystack = ' '.join([name, description] + sorted(topics)).lower()
    for category, pattern in CATEGORY_RULES:
        if pattern.search(haystack):
            return category
    return Category.GENERAL

def canonical_technology(language: str) -> str:
    """Map a GitHub language name onto the technology table entry it belongs to."""
    lower = language.lower()
    for technology, keywords in TECHNOLOGY_RULES:
        if lower == technology.lower() or any(keyword == lower for keyword, _ in keywords):
            return technology
    return language

def extract_technologies(name: str, description: str, topics: Iterable[str],
                         primary_language: Optional[str]) -> Tuple[str, ...]:
    """Suggest technologies from the primary language and keyword hits."""
    technologies: List[str] = []
    seen: Set[str] = set()

    def add(technology: str) -> None:
        if technology.lower() not in seen:
            seen.add(technology.lower())
            technologies.append(technology)

    if primary_language:
        add(canonical_technology(primary_language))

    text = f"{name} {description}".lower()
    lower_topics = {topic.lower() for topic in topics}
    for technology, keywords in TECHNOLOGY_RULES:
        for keyword, pattern in keywords:
            if keyword in lower_topics or pattern.search(text):
                add(technology)
                break

    return tuple(sorted(technologies, key=lambda t: (t.lower(), t)))

def suggest_difficulty(confidence: float, is_match: bool, star_count: int, fork_count: int,
                       weights: ScoringWeights = DEFAULT_WEIGHTS) -> Difficulty:
    """Escalate Beginner -> Intermediate -> Advanced as signal grows.

    Advanced: confidence >= ``advanced_confidence`` or more than
    ``advanced_stars`` stars.
    Intermediate: confidence >= ``intermediate_confidence``, more than
    ``intermediate_stars`` stars, any fork, or a curriculum match.
    """
    if confidence >= weights.advanced_confidence or star_count > weights.advanced_stars:
        return Difficulty.ADVANCED
    if (confidence >= weights.intermediate_confidence
            or star_count > weights.intermediate_stars
            or fork_count > 0
            or is_match):
        return Difficulty.INTERMEDIATE
    return Difficulty.BEGINNER

class RepositoryClassifier:
    """Scores repositories against the curriculum conventions.

    Instances hold nothing but immutable weights, so one classifier can be
    shared freely between threads.
    """

    def __init__(self, weights: ScoringWeights = DEFAULT_WEIGHTS) -> None:
        self.weights = weights

    def classify(self, descriptor: RepositoryDescriptor) -> ClassificationResult:
        """Classify a single repository."""
        weights = self.weights
        name = descriptor.name or ''
        description = descriptor.description or ''
        topics = descriptor.topics or frozenset()
        trace = FeatureTrace()

        raw_score = 0.0
        raw_score += score_name(name, weights, trace)
        raw_score += score_topics(topics, weights, trace)
        raw_score += score_description(description, weights, trace)
        raw_score += score_characteristics(descriptor, weights, trace)

        confidence = min(max(raw_score / weights.confidence_divisor, 0.0), 1.0)
        is_match = raw_score >= weights.match_threshold

        category = determine_category(name, description, topics)
        technologies = extract_technologies(name, description, topics, descriptor.primary_language)
        difficulty = suggest_difficulty(confidence, is_match, descriptor.star_count,
                                        descriptor.fork_count, weights)

        logger.info(f"Classified '{name}': score={raw_score:.2f}, confidence={confidence:.2f}, "
                    f"match={is_match}, category={category.value}")

        return ClassificationResult(
            raw_score=raw_score,
            confidence=confidence,
            is_match=is_match,
            category=category,
            suggested_technologies=technologies,
            suggested_difficulty=difficulty,
            matched_features=trace.as_tuple(),
        )

_default_classifier = RepositoryClassifier()

def classify(descriptor: RepositoryDescriptor) -> ClassificationResult:
    """Classify a repository with the default weights."""
    return _default_classifier.classify(descriptor)
