"""Unit tests for the repository classifier."""

import pytest
from alx_showcase.core.classifier import (
    FeatureTrace,
    canonical_technology,
    RepositoryClassifier,
    classify,
    determine_category,
    suggest_difficulty,
)
from alx_showcase.core.config import DEFAULT_WEIGHTS, weights_from_mapping
from alx_showcase.core.patterns import CATEGORY_RULES
from alx_showcase.core.types import Category, Difficulty, RepositoryDescriptor

@pytest.fixture
def low_level_repo():
    """A typical first-trimester curriculum repository."""
    return RepositoryDescriptor(
        name="alx-low_level_programming",
        description="printf function implementation in C",
        topics=frozenset({"c-programming"}),
        primary_language="C",
        size_kb=50,
        is_fork=False,
    )

def test_classification_is_deterministic(low_level_repo):
    """Two calls on equal input give identical results."""
    assert classify(low_level_repo) == classify(low_level_repo)
    assert classify(low_level_repo) == RepositoryClassifier().classify(low_level_repo)

def test_empty_descriptor():
    """An empty repository is general, unmatched and has no technologies."""
    result = classify(RepositoryDescriptor(name=""))

    assert result.category == Category.GENERAL
    assert result.is_match is False
    assert result.suggested_technologies == ()
    assert result.suggested_difficulty == Difficulty.BEGINNER
    # Only the originality bonus applies
    assert result.raw_score == pytest.approx(DEFAULT_WEIGHTS.original_work_bonus)
    assert result.matched_features == ("Original work (not a fork)",)

def test_missing_optional_fields_do_not_fail():
    """None in optional fields is treated as empty."""
    descriptor = RepositoryDescriptor(name="notes", description=None, topics=None,
                                      primary_language=None, size_kb=None)
    result = classify(descriptor)
    assert result.category == Category.GENERAL
    assert result.is_match is False

def test_hex_prefixed_name_matches():
    """0x00-style names score the name bonus and are detected."""
    result = classify(RepositoryDescriptor(name="0x00-hello_world"))

    assert result.is_match is True
    assert result.raw_score == pytest.approx(4.0)
    assert result.matched_features[0] == "Name matches curriculum pattern: ^0x[0-9a-f]{2}-"
    assert result.category == Category.LOW_LEVEL

def test_only_first_name_pattern_counts():
    """A name matching several patterns is scored once."""
    result = classify(RepositoryDescriptor(name="alx-simple_shell", is_fork=True))

    assert result.raw_score == pytest.approx(DEFAULT_WEIGHTS.name_pattern_bonus)
    name_features = [f for f in result.matched_features if f.startswith("Name matches")]
    assert name_features == ["Name matches curriculum pattern: ^alx-"]

def test_each_curriculum_topic_scores():
    """Every matching topic contributes; unrelated topics do not."""
    result = classify(RepositoryDescriptor(
        name="practice",
        topics=frozenset({"devops", "alx-backend", "random"}),
        is_fork=True,
    ))

    assert result.raw_score == pytest.approx(2 * DEFAULT_WEIGHTS.topic_bonus)
    assert result.matched_features == ("Topic: alx-backend", "Topic: devops")

def test_topics_compared_case_insensitively():
    """Topics are lower-cased before lookup."""
    result = classify(RepositoryDescriptor(name="x", topics=frozenset({"DevOps"}), is_fork=True))
    assert result.raw_score == pytest.approx(DEFAULT_WEIGHTS.topic_bonus)
    assert "Topic: DevOps" in result.matched_features

def test_description_keywords_all_count():
    """Each keyword contained in the description adds a bonus."""
    result = classify(RepositoryDescriptor(
        name="capstone",
        description="ALX backend and frontend work",
        is_fork=True,
    ))

    assert result.raw_score == pytest.approx(3 * DEFAULT_WEIGHTS.description_keyword_bonus)
    assert result.matched_features == (
        "Description contains: alx",
        "Description contains: backend",
        "Description contains: frontend",
    )

def test_language_bonuses_are_ordered():
    """C scores higher than Python, which scores higher than JavaScript."""
    def score(language):
        return classify(RepositoryDescriptor(name="x", primary_language=language, is_fork=True)).raw_score

    assert score("C") > score("Python") > score("JavaScript") > score("Go")
    assert score("TypeScript") == score("JavaScript")
    assert score("c") == score("C")

def test_fork_bonus_is_additive(low_level_repo):
    """Descriptors differing only in is_fork differ by exactly the fork bonus."""
    original = classify(low_level_repo)
    fork = classify(RepositoryDescriptor(
        name=low_level_repo.name,
        description=low_level_repo.description,
        topics=low_level_repo.topics,
        primary_language=low_level_repo.primary_language,
        size_kb=low_level_repo.size_kb,
        is_fork=True,
    ))

    assert original.raw_score - fork.raw_score == pytest.approx(DEFAULT_WEIGHTS.original_work_bonus)

def test_small_repository_bonus():
    """Only known sizes below the threshold get the size bonus."""
    small = classify(RepositoryDescriptor(name="x", size_kb=999, is_fork=True))
    large = classify(RepositoryDescriptor(name="x", size_kb=1000, is_fork=True))
    unknown = classify(RepositoryDescriptor(name="x", is_fork=True))

    assert small.raw_score == pytest.approx(DEFAULT_WEIGHTS.small_repository_bonus)
    assert large.raw_score == 0.0
    assert unknown.raw_score == 0.0

def test_technology_dedup():
    """The primary language is not repeated by matching topics."""
    result = classify(RepositoryDescriptor(
        name="algorithms",
        topics=frozenset({"python", "data_structures"}),
        primary_language="Python",
    ))

    lowered = [t.lower() for t in result.suggested_technologies]
    assert lowered.count("python") == 1
    assert result.suggested_technologies == ("Python",)

def test_technologies_sorted_and_keyword_based():
    """Keyword hits add technologies; the result is sorted."""
    result = classify(RepositoryDescriptor(
        name="web_flask",
        description="Flask app with a MySQL database and Bootstrap pages",
        primary_language="Python",
    ))

    assert result.suggested_technologies == ("Bootstrap", "Flask", "Python", "SQL")

def test_single_letter_keyword_needs_word_boundary():
    """'c' only counts as a whole token."""
    result = classify(RepositoryDescriptor(name="cool-project", description="A classic concept"))
    assert "C" not in result.suggested_technologies

def test_category_priority_follows_table_order():
    """Frontend is listed before backend, so it wins when both match."""
    order = [category for category, _ in CATEGORY_RULES]
    assert order.index(Category.FRONTEND) < order.index(Category.BACKEND)

    both = classify(RepositoryDescriptor(name="portfolio-site",
                                         description="React client talking to a Flask API"))
    backend_only = classify(RepositoryDescriptor(name="bookstore",
                                                 description="Flask API for a bookstore"))

    assert both.category == Category.FRONTEND
    assert backend_only.category == Category.BACKEND

@pytest.mark.parametrize("name,description,expected", [
    ("0x03-debugging", "", Category.LOW_LEVEL),
    ("0x0A-python-inheritance", "", Category.HIGHER_LEVEL),
    ("alx-higher_level_programming", "", Category.HIGHER_LEVEL),
    ("portfolio", "html and css landing page", Category.FRONTEND),
    ("alx_backend_storage", "", Category.BACKEND),
    ("0x1B-web_stack_debugging", "docker and nginx", Category.DEVOPS),
    ("AirBnB_clone_v2", "", Category.FULLSTACK),
    ("stock-forecast", "machine learning experiments", Category.AI_ML),
    ("email-client", "", Category.GENERAL),
])
def test_determine_category(name, description, expected):
    """Category table covers each curriculum track."""
    assert determine_category(name, description, []) == expected

def test_end_to_end_low_level(low_level_repo):
    """A low-level curriculum repository is fully classified."""
    result = classify(low_level_repo)

    assert result.is_match is True
    assert result.raw_score == pytest.approx(9.0)
    assert result.confidence == pytest.approx(0.9)
    assert result.category == Category.LOW_LEVEL
    assert "C" in result.suggested_technologies
    assert result.suggested_difficulty == Difficulty.ADVANCED
    assert result.matched_features == (
        "Name matches curriculum pattern: ^alx-",
        "Topic: c-programming",
        "Primary language: C",
        "Small repository (< 1000 KB)",
        "Original work (not a fork)",
    )

def test_confidence_clamped_to_one():
    """Scores above the divisor saturate at full confidence."""
    result = classify(RepositoryDescriptor(
        name="alx-system_engineering-devops",
        description="ALX software engineering devops",
        topics=frozenset({"alx-software-engineering", "devops", "system-engineering", "holberton-school"}),
        primary_language="C",
        size_kb=10,
    ))

    assert result.raw_score > DEFAULT_WEIGHTS.confidence_divisor
    assert result.confidence == 1.0

def test_confidence_floored_at_zero():
    """A negative raw score gives zero confidence."""
    classifier = RepositoryClassifier(weights_from_mapping({"original_work_bonus": -5}))
    result = classifier.classify(RepositoryDescriptor(name=""))

    assert result.raw_score == pytest.approx(-5.0)
    assert result.confidence == 0.0
    assert result.is_match is False

def test_custom_threshold():
    """The match threshold comes from the weights."""
    strict = RepositoryClassifier(weights_from_mapping({"match_threshold": 5}))
    assert strict.classify(RepositoryDescriptor(name="0x00-hello_world")).is_match is False

@pytest.mark.parametrize("confidence,is_match,stars,forks,expected", [
    (0.1, False, 0, 0, Difficulty.BEGINNER),
    (0.5, False, 0, 0, Difficulty.INTERMEDIATE),
    (0.1, True, 0, 0, Difficulty.INTERMEDIATE),
    (0.1, False, 6, 0, Difficulty.INTERMEDIATE),
    (0.1, False, 0, 1, Difficulty.INTERMEDIATE),
    (0.8, False, 0, 0, Difficulty.ADVANCED),
    (0.1, False, 21, 0, Difficulty.ADVANCED),
])
def test_suggest_difficulty(confidence, is_match, stars, forks, expected):
    """Difficulty thresholds on confidence, stars and forks."""
    assert suggest_difficulty(confidence, is_match, stars, forks) == expected

def test_difficulty_is_monotonic():
    """More stars never lowers the suggested difficulty."""
    ranks = [Difficulty.BEGINNER, Difficulty.INTERMEDIATE, Difficulty.ADVANCED]
    previous = 0
    for stars in range(0, 30):
        rank = ranks.index(suggest_difficulty(0.2, False, stars, 0))
        assert rank >= previous
        previous = rank

def test_feature_trace_keeps_first_occurrence():
    """Duplicates are dropped, order is preserved."""
    trace = FeatureTrace()
    for feature in ["b", "a", "b", "c", "a"]:
        trace.add(feature)
    assert trace.as_tuple() == ("b", "a", "c")

@pytest.mark.parametrize("language,description,expected", [
    ("HTML", "html landing page", ("HTML/CSS",)),
    ("CSS", "", ("HTML/CSS",)),
    ("Shell", "bash scripts", ("Shell",)),
    ("shell", "", ("Shell",)),
    ("Go", "", ("Go",)),
])
def test_primary_language_mapped_to_technology(language, description, expected):
    """A language and the technology it belongs to are listed once."""
    result = classify(RepositoryDescriptor(name="site", description=description,
                                           primary_language=language))
    assert result.suggested_technologies == expected

def test_canonical_technology():
    """Languages map onto technology table entries, unknown ones pass through."""
    assert canonical_technology("HTML") == "HTML/CSS"
    assert canonical_technology("javascript") == "JavaScript"
    assert canonical_technology("Rust") == "Rust"
