"""NLU module: intent classification and entity extraction."""

from .classifier import IClassifier, LLMClassifier, PatternClassifier
from .extractor import DEFAULT_PATTERNS, IEntityExtractor, RegexEntityExtractor

__all__ = [
    "IClassifier",
    "LLMClassifier",
    "PatternClassifier",
    "IEntityExtractor",
    "RegexEntityExtractor",
    "DEFAULT_PATTERNS",
]
