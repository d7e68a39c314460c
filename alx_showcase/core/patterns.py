"""Curriculum pattern tables used by the repository classifier.

Every table here is built once at import time and never mutated. Order is
significant wherever a tuple is used: the first matching entry wins.
"""

import re
from typing import FrozenSet, Pattern, Tuple

from .types import Category

# Repository name conventions. Only the first hit scores.
NAME_PATTERNS: Tuple[Pattern, ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r'^0x[0-9a-f]{2}-',  # 0x00-hello_world, 0x1A-...
        r'^alx-',  # alx-low_level_programming
        r'^holberton',  # holberton-system_engineering
        r'simple_shell',
        r'printf',
        r'monty',
        r'sorting_algorithms',
        r'binary_trees',
        r'airbnb_clone',
    )
)

# GitHub topics associated with the curriculum, compared lower-cased.
TOPIC_PATTERNS: FrozenSet[str] = frozenset({
    'alx-software-engineering',
    'holberton-school',
    'c-programming',
    'python-programming',
    'low-level-programming',
    'system-engineering',
    'higher-level-programming',
    'alx-backend',
    'alx-frontend',
    'devops',
})

# Plain substrings looked up in the lower-cased description.
DESCRIPTION_KEYWORDS: Tuple[str, ...] = (
    'alx',
    'holberton',
    'software engineering',
    'low level programming',
    'higher level programming',
    'system engineering',
    'devops',
    'backend',
    'frontend',
)

# Primary language (lower-cased) -> weights attribute holding its bonus.
LANGUAGE_BONUSES: Tuple[Tuple[str, str], ...] = (
    ('c', 'c_language_bonus'),
    ('python', 'python_language_bonus'),
    ('javascript', 'javascript_language_bonus'),
    ('typescript', 'javascript_language_bonus'),
)

SMALL_REPOSITORY_KB = 1000

# Category table, evaluated top to bottom against name + description + topics.
CATEGORY_RULES: Tuple[Tuple[Category, Pattern], ...] = (
    (Category.LOW_LEVEL, re.compile(
        r'0x0[0-6]|low.?level|system|unix|linux|shell|printf|malloc', re.IGNORECASE)),
    (Category.HIGHER_LEVEL, re.compile(
        r'0x0[7-9]|0x1[0-5]|higher.?level|python|oop|object', re.IGNORECASE)),
    (Category.FRONTEND, re.compile(
        r'frontend|html|css|javascript|react|bootstrap', re.IGNORECASE)),
    (Category.BACKEND, re.compile(
        r'backend|api|database|sql|mysql|flask|django', re.IGNORECASE)),
    (Category.DEVOPS, re.compile(
        r'devops|deployment|docker|nginx|load.?balancer|monitoring', re.IGNORECASE)),
    (Category.FULLSTACK, re.compile(
        r'airbnb|clone|full.?stack', re.IGNORECASE)),
    (Category.AI_ML, re.compile(
        r'machine.?learning|\bai\b|data', re.IGNORECASE)),
)

# Technology -> keywords. Keywords match on word boundaries in the name and
# description, or exactly against a topic.
TECHNOLOGY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ('C', ('c', 'c-programming', 'low_level_programming', 'low-level-programming')),
    ('Python', ('python', 'python-programming', 'higher_level_programming',
                'higher-level-programming', 'data_structures')),
    ('JavaScript', ('javascript', 'js', 'node', 'nodejs')),
    ('TypeScript', ('typescript',)),
    ('HTML/CSS', ('html', 'css', 'html5', 'css3')),
    ('React', ('react', 'reactjs')),
    ('Bootstrap', ('bootstrap',)),
    ('Shell', ('shell', 'bash', 'sysadmin', 'simple_shell')),
    ('SQL', ('sql', 'mysql', 'postgresql', 'database')),
    ('Flask', ('flask',)),
    ('Django', ('django',)),
    ('Express', ('express',)),
    ('Redis', ('redis',)),
    ('MongoDB', ('mongodb',)),
    ('Docker', ('docker',)),
    ('Nginx', ('nginx',)),
    ('Puppet', ('puppet',)),
)

def keyword_pattern(keyword: str) -> Pattern:
    """Compile a keyword so it only matches as a whole token."""
    return re.compile(r'(?<![a-z0-9])' + re.escape(keyword) + r'(?![a-z0-9])')

TECHNOLOGY_RULES: Tuple[Tuple[str, Tuple[Tuple[str, Pattern], ...]], ...] = tuple(
    (technology, tuple((keyword, keyword_pattern(keyword)) for keyword in keywords))
    for technology, keywords in TECHNOLOGY_KEYWORDS
)
