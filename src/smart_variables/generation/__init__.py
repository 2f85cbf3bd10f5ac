"""Generation sub-package – candidate names from a language model."""

from smart_variables.generation.cache import LRUCache
from smart_variables.generation.generator import (
    GenerationError,
    NameGenerator,
    clear_cache,
    parse_candidates,
)
from smart_variables.generation.prompting import (
    build_prompt,
    detect_intent,
    examples_for,
    language_guidance,
)

__all__ = [
    "LRUCache",
    "GenerationError",
    "NameGenerator",
    "clear_cache",
    "parse_candidates",
    "build_prompt",
    "detect_intent",
    "examples_for",
    "language_guidance",
]
