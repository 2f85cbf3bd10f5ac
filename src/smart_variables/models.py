"""Pydantic domain models shared across style inference and name generation."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ────────────────────────────────────────────────────────────────────
# Enums
# ────────────────────────────────────────────────────────────────────

class NamingStyle(str, Enum):
    """The four identifier naming conventions the engine can decide on."""

    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    UPPER = "upper"

    @classmethod
    def from_string(cls, value: str) -> "NamingStyle | None":
        """Normalize common spellings (``camelCase``, ``UPPER_SNAKE_CASE``...)."""
        normalized = value.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            aliases = {
                "camelcase": cls.CAMEL,
                "camel_case": cls.CAMEL,
                "pascalcase": cls.PASCAL,
                "pascal_case": cls.PASCAL,
                "snake_case": cls.SNAKE,
                "snakecase": cls.SNAKE,
                "upper_case": cls.UPPER,
                "upper_snake_case": cls.UPPER,
                "constant": cls.UPPER,
            }
            return aliases.get(normalized)


class StyleMode(str, Enum):
    """How the preferred style is chosen when no explicit style is configured."""

    AUTO = "auto"
    ASK = "ask"


class IntentType(str, Enum):
    """Whether the user describes an action (method name) or a thing (property)."""

    METHOD = "method"
    PROPERTY = "property"


class GenerationErrorCategory(str, Enum):
    """Categories of generation failures for structured error reporting."""

    MISSING_API_KEY = "missing_api_key"
    MISSING_MODEL = "missing_model"
    EMPTY_RESPONSE = "empty_response"
    TIMEOUT = "timeout"
    RATE_LIMITED = "rate_limited"
    API_ERROR = "api_error"
    UNKNOWN = "unknown"


# ────────────────────────────────────────────────────────────────────
# Context window
# ────────────────────────────────────────────────────────────────────

class IdentifierRecord(BaseModel):
    """An identifier found near the target line, with its classified style."""

    name: str
    style: NamingStyle


class ContextSnapshot(BaseModel):
    """Aggregate facts about the lines around an inference target.

    Flags are OR-accumulated over the whole window; once a line sets one it
    stays set.  ``class_depth`` / ``function_depth`` count matching lines,
    they are not real nesting depths.
    """

    target_line: str = ""
    surrounding_lines: list[str] = Field(default_factory=list)
    in_class: bool = False
    in_function: bool = False
    in_interface: bool = False
    in_enum: bool = False
    is_constant_context: bool = False
    is_type_definition: bool = False
    class_depth: int = 0
    function_depth: int = 0
    existing_identifiers: list[IdentifierRecord] = Field(default_factory=list)


# ────────────────────────────────────────────────────────────────────
# Generation
# ────────────────────────────────────────────────────────────────────

class GenerationContext(BaseModel):
    """Optional hints passed along with a generation request."""

    language: str | None = None
    current_line: str | None = None


class Suggestion(BaseModel):
    """Result of one suggest round-trip: the style used and the candidates."""

    meaning: str
    style: NamingStyle
    candidates: list[str] = Field(default_factory=list)
    language: str | None = None
