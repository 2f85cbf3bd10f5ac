"""Styles sub-package – the naming-style inference core.

Importing this module registers every language rule table, so the
registry is ready before the context builder or the engine is used.
"""

from smart_variables.styles.rules import (
    DirectPattern,
    LanguageRegistry,
    LanguageRules,
    LinePattern,
    registry,
)
from smart_variables.styles import languages  # noqa: F401  (registers rule tables)
from smart_variables.styles.classifier import classify
from smart_variables.styles.context import DEFAULT_RADIUS, build_context
from smart_variables.styles.engine import default_style, infer, infer_at, majority_style

__all__ = [
    "DirectPattern",
    "LanguageRegistry",
    "LanguageRules",
    "LinePattern",
    "registry",
    "classify",
    "DEFAULT_RADIUS",
    "build_context",
    "default_style",
    "infer",
    "infer_at",
    "majority_style",
]
