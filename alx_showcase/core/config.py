"""Scoring weights for the repository classifier."""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging
import math

import yaml

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ScoringWeights:
    """Bonuses and thresholds on the 0-10 curriculum scale."""
    name_pattern_bonus: float = 3.0
    topic_bonus: float = 2.0
    description_keyword_bonus: float = 1.0
    c_language_bonus: float = 2.0
    python_language_bonus: float = 1.5
    javascript_language_bonus: float = 0.5
    small_repository_bonus: float = 1.0
    original_work_bonus: float = 1.0
    confidence_divisor: float = 10.0
    match_threshold: float = 3.0
    # Difficulty escalation
    intermediate_confidence: float = 0.5
    advanced_confidence: float = 0.8
    intermediate_stars: int = 5
    advanced_stars: int = 20

DEFAULT_WEIGHTS = ScoringWeights()

def weights_from_mapping(overrides: Dict[str, Any], base: ScoringWeights = DEFAULT_WEIGHTS) -> ScoringWeights:
    """Apply a mapping of overrides on top of ``base``."""
    known = {f.name: f.type for f in fields(ScoringWeights)}
    unknown = sorted((key for key in overrides if key not in known), key=str)
    if unknown:
        raise ValueError(f"Unknown scoring weight(s): {', '.join(map(str, unknown))}")

    values = {}
    for key, value in overrides.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Scoring weight '{key}' must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"Scoring weight '{key}' must be finite, got {value!r}")
        if known[key] in (int, 'int'):
            if value != int(value):
                raise ValueError(f"Scoring weight '{key}' must be a whole number, got {value!r}")
            values[key] = int(value)
        else:
            values[key] = float(value)

    weights = replace(base, **values)
    if weights.confidence_divisor <= 0:
        raise ValueError("confidence_divisor must be positive")
    return weights

def load_weights(path: Optional[Union[str, Path]] = None) -> ScoringWeights:
    """Load scoring weights from a YAML file, falling back to the defaults."""
    if path is None:
        return DEFAULT_WEIGHTS

    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid weights file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Weights file {path} must contain a mapping")

    logger.info(f"Loaded {len(data)} scoring weight override(s) from {path}")
    return weights_from_mapping(data)
