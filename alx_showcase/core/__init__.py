"""Core package for the ALX Showcase repository classifier."""

from .classifier import RepositoryClassifier, classify
from .types import Category, ClassificationResult, Difficulty, RepositoryDescriptor

__all__ = ['RepositoryClassifier', 'classify', 'Category', 'ClassificationResult',
           'Difficulty', 'RepositoryDescriptor']
