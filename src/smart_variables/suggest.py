"""Suggestion service – wires documents, style inference, config and generation.

The host (CLI, HTTP server, an editor bridge) hands over a document and the
user's meaning; this module decides the naming style, asks the generator for
candidates and can insert the chosen one back into the document.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, overload

from smart_variables.config import settings
from smart_variables.generation import NameGenerator
from smart_variables.models import (
    ContextSnapshot,
    GenerationContext,
    NamingStyle,
    StyleMode,
    Suggestion,
)
from smart_variables.store import ConfigKey, ConfigScope, ConfigStore
from smart_variables.styles import build_context, infer
from smart_variables.utils.logging import get_logger
from smart_variables.utils.prompts import STYLE_DESCRIPTIONS

logger = get_logger(__name__)

STYLE_CHOICES: list[tuple[NamingStyle, str]] = [(style, STYLE_DESCRIPTIONS[style]) for style in NamingStyle]

_EXTENSION_LANGUAGES = {
    ".py": "python", ".js": "javascript", ".jsx": "javascript", ".mjs": "javascript",
    ".ts": "typescript", ".tsx": "typescript", ".java": "java", ".cs": "csharp",
    ".c": "c", ".h": "c", ".cpp": "cpp", ".cc": "cpp", ".cxx": "cpp", ".hpp": "cpp",
    ".rb": "ruby", ".rs": "rust", ".kt": "kotlin", ".swift": "swift", ".go": "go",
}


def guess_language(filename: str) -> str:
    """Guess the language id from a filename's extension."""
    return _EXTENSION_LANGUAGES.get(Path(filename).suffix.lower(), "plaintext")


class InsertionError(ValueError):
    """Raised when a candidate cannot be inserted at the document cursor."""


# ────────────────────────────────────────────────────────────────────
# Host documents
# ────────────────────────────────────────────────────────────────────

@dataclass
class Cursor:
    line: int = 0
    character: int = 0


class DocumentAccessor(Protocol):
    """Read-only view of a host document."""

    def line_count(self) -> int: ...

    def line_at(self, index: int) -> str: ...

    def language_id(self) -> str: ...

    def cursor(self) -> Cursor: ...


class TextDocument:
    """In-memory document implementing :class:`DocumentAccessor`."""

    def __init__(self, text: str, language: str, cursor: Cursor | None = None) -> None:
        self._lines = text.replace("\r\n", "\n").split("\n")
        self._language = language
        self._cursor = cursor or Cursor()

    @classmethod
    def from_path(
        cls,
        path: Path,
        language: str | None = None,
        line: int = 0,
        character: int = 0,
    ) -> "TextDocument":
        text = Path(path).read_text(encoding="utf-8")
        return cls(text, language or guess_language(str(path)), Cursor(line, character))

    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> str:
        return self._lines[index]

    def language_id(self) -> str:
        return self._language

    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def insert(self, value: str) -> None:
        """Insert *value* at the cursor and move the cursor past it.

        Raises :class:`InsertionError` when the cursor line is outside the
        document; a column past the end of the line is clamped.
        """
        if not 0 <= self._cursor.line < len(self._lines):
            raise InsertionError(
                f"Cursor line {self._cursor.line} is outside the document (0-{len(self._lines) - 1})"
            )
        line = self._lines[self._cursor.line]
        column = min(self._cursor.character, len(line))
        self._lines[self._cursor.line] = line[:column] + value + line[column:]
        self._cursor = Cursor(self._cursor.line, column + len(value))


class DocumentLines(Sequence[str]):
    """Random-access line sequence over any :class:`DocumentAccessor`."""

    def __init__(self, document: DocumentAccessor) -> None:
        self._document = document

    def __len__(self) -> int:
        return self._document.line_count()

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        if isinstance(index, slice):
            return [self._document.line_at(i) for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError(index)
        return self._document.line_at(index)

    def __iter__(self) -> Iterator[str]:
        for i in range(len(self)):
            yield self._document.line_at(i)


def current_line(document: DocumentAccessor) -> str:
    index = document.cursor().line
    if 0 <= index < document.line_count():
        return document.line_at(index)
    return ""


# ────────────────────────────────────────────────────────────────────
# Style detection
# ────────────────────────────────────────────────────────────────────

class StyleDetector:
    """Infers the naming style at a document's cursor."""

    def __init__(self, radius: int | None = None) -> None:
        self.radius = settings.context_radius if radius is None else radius

    def snapshot(self, document: DocumentAccessor) -> ContextSnapshot:
        return build_context(
            DocumentLines(document),
            document.cursor().line,
            document.language_id(),
            radius=self.radius,
        )

    def analyze(self, document: DocumentAccessor) -> tuple[ContextSnapshot, NamingStyle]:
        """Build the snapshot once and infer from it; callers that report flags use this."""
        snapshot = self.snapshot(document)
        return snapshot, infer(document.language_id(), current_line(document), snapshot)

    def detect(self, document: DocumentAccessor) -> NamingStyle:
        return self.analyze(document)[1]


# Given the choices and the preselected style, return the pick or None on cancel.
StylePicker = Callable[[list[NamingStyle], NamingStyle | None], NamingStyle | None]


class SuggestionService:
    """The suggest round-trip: style → generation → candidates."""

    def __init__(
        self,
        store: ConfigStore | None = None,
        generator_factory: Callable[[], NameGenerator] | None = None,
        detector: StyleDetector | None = None,
    ) -> None:
        self.store = store or ConfigStore()
        self.detector = detector or StyleDetector()
        self._generator_factory = generator_factory or self._default_generator

    def _default_generator(self) -> NameGenerator:
        return NameGenerator(
            base_url=str(self.store.get(ConfigKey.BASE_URL) or ""),
            model=str(self.store.get(ConfigKey.MODEL_ID) or ""),
            api_key=str(self.store.get(ConfigKey.API_KEY) or ""),
        )

    def resolve_style(
        self,
        document: DocumentAccessor | None = None,
        explicit: NamingStyle | None = None,
        picker: StylePicker | None = None,
    ) -> NamingStyle:
        """Decide which style to request.

        An explicit style wins; otherwise the configured preference applies:
        ``auto`` infers from the document, a configured style is used as is,
        and ``ask`` defers to *picker* with the inferred style preselected.
        A cancelled or missing picker, or ``auto`` without a document,
        falls back to camel.
        """
        if explicit is not None:
            return explicit

        preference = self.store.preference()
        if isinstance(preference, NamingStyle):
            return preference

        if preference is StyleMode.AUTO:
            if document is None:
                return NamingStyle.CAMEL
            style = self.detector.detect(document)
            logger.info("suggest.style_resolved", mode="auto", language=document.language_id(), style=style.value)
            return style

        choices = [style for style, _ in STYLE_CHOICES]
        # The inferred style is offered as the preselected choice.
        preselected = self.detector.detect(document) if document is not None else None
        picked = picker(choices, preselected) if picker is not None else None
        if picked is None:
            logger.warning("suggest.style_not_chosen", fallback=NamingStyle.CAMEL.value)
            return NamingStyle.CAMEL
        return picked

    async def suggest(
        self,
        meaning: str,
        document: DocumentAccessor | None = None,
        *,
        style: NamingStyle | None = None,
        picker: StylePicker | None = None,
        count: int | None = None,
    ) -> Suggestion:
        """Generate candidate names for *meaning* at the document's cursor."""
        if not meaning or not meaning.strip():
            raise ValueError("meaning must not be blank")

        chosen = self.resolve_style(document, explicit=style, picker=picker)
        context = None
        if document is not None:
            context = GenerationContext(
                language=document.language_id(),
                current_line=current_line(document),
            )

        async with self._generator_factory() as generator:
            candidates = await generator.generate(
                meaning.strip(),
                chosen,
                count or settings.candidate_count,
                context,
            )

        return Suggestion(
            meaning=meaning.strip(),
            style=chosen,
            candidates=candidates,
            language=context.language if context else None,
        )

    def toggle_mode(self) -> StyleMode:
        """Flip the preference between ``auto`` and ``ask`` and persist it globally."""
        current = self.store.preference()
        new_mode = StyleMode.ASK if current is StyleMode.AUTO else StyleMode.AUTO
        self.store.set(ConfigKey.PREFERRED_STYLE, new_mode.value, ConfigScope.GLOBAL)
        logger.info("suggest.mode_toggled", mode=new_mode.value)
        return new_mode

    @staticmethod
    def insert(document: TextDocument, candidate: str) -> Cursor:
        """Insert *candidate* at the document cursor and return the new cursor."""
        document.insert(candidate)
        cursor = document.cursor()
        logger.info("suggest.inserted", candidate=candidate, line=cursor.line, character=cursor.character)
        return cursor
