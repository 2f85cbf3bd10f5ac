"""Language rule tables and the registry that maps language ids to them.

Every supported language is described by one :class:`LanguageRules` value:
structural predicates (is this line a class / function / interface / enum /
constant / type alias?), the direct patterns that decide a style on their
own, the class-member shape, and the extraction patterns that pull declared
names out of a line.  The context builder and the inference engine both read
the same table, so the two never disagree about what a line is.

Languages self-register in :mod:`smart_variables.styles.languages`::

    registry.register(
        LanguageRules(language="go", default_style=NamingStyle.CAMEL, ...),
        aliases=("golang",),
    )

Lookups never fail: an unknown id resolves to an empty rule set whose
default style is camel.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from smart_variables.models import NamingStyle
from smart_variables.utils.logging import get_logger

logger = get_logger(__name__)

Pattern = re.Pattern[str]


@dataclass(frozen=True)
class LinePattern:
    """A pattern that both tests a line and extracts one identifier from it."""

    matcher: Pattern
    group: int = 1

    def extract(self, line: str) -> str | None:
        match = self.matcher.search(line)
        if match is None:
            return None
        return match.group(self.group) or None


@dataclass(frozen=True)
class DirectPattern:
    """A single-line cue strong enough to decide the style by itself."""

    matcher: Pattern
    style: NamingStyle


def _any(patterns: tuple[Pattern, ...], line: str) -> bool:
    return any(p.search(line) for p in patterns)


@dataclass(frozen=True)
class LanguageRules:
    """Everything the engine knows about one language."""

    language: str
    default_style: NamingStyle = NamingStyle.CAMEL
    class_patterns: tuple[Pattern, ...] = ()
    function_patterns: tuple[Pattern, ...] = ()
    interface_patterns: tuple[Pattern, ...] = ()
    enum_patterns: tuple[Pattern, ...] = ()
    constant_patterns: tuple[Pattern, ...] = ()
    type_definition_patterns: tuple[Pattern, ...] = ()
    # Ordered: the first direct pattern that matches wins.
    direct_patterns: tuple[DirectPattern, ...] = ()
    member_patterns: tuple[Pattern, ...] = ()
    # Not ordered by priority; every match on a line is collected.
    extraction_patterns: tuple[LinePattern, ...] = field(default=())

    # ── structural predicates ────────────────────────────────────────

    def is_class(self, line: str) -> bool:
        return _any(self.class_patterns, line)

    def is_function(self, line: str) -> bool:
        return _any(self.function_patterns, line)

    def is_interface(self, line: str) -> bool:
        return _any(self.interface_patterns, line)

    def is_enum(self, line: str) -> bool:
        return _any(self.enum_patterns, line)

    def is_constant_context(self, line: str) -> bool:
        return _any(self.constant_patterns, line)

    def is_type_definition(self, line: str) -> bool:
        return _any(self.type_definition_patterns, line)

    def is_class_member(self, line: str) -> bool:
        """True when *line* has this language's class-member declaration shape."""
        return _any(self.member_patterns, line)

    # ── style cues ───────────────────────────────────────────────────

    def direct_style(self, line: str) -> NamingStyle | None:
        """Return the style forced by *line* itself, or ``None``."""
        for direct in self.direct_patterns:
            if direct.matcher.search(line):
                return direct.style
        return None

    def extract_identifiers(self, line: str) -> list[str]:
        """Names declared on *line*, in extraction-pattern order."""
        names: list[str] = []
        for pattern in self.extraction_patterns:
            name = pattern.extract(line)
            if name:
                names.append(name)
        return names


class LanguageRegistry:
    """Singleton registry mapping language ids (and aliases) → ``LanguageRules``."""

    def __init__(self) -> None:
        self._rules: dict[str, LanguageRules] = {}
        self._aliases: dict[str, str] = {}

    def register(self, rules: LanguageRules, aliases: tuple[str, ...] = ()) -> LanguageRules:
        """Register *rules* under its language id and any *aliases*."""
        key = rules.language.lower()
        if key in self._rules:
            logger.warning("registry.overwrite", language=key)
        self._rules[key] = rules
        for alias in aliases:
            self._aliases[alias.lower()] = key
        return rules

    def resolve(self, language: str) -> str:
        """Map an alias (``tsx``, ``py``...) to its canonical language id."""
        key = (language or "").strip().lower()
        return self._aliases.get(key, key)

    def get(self, language: str) -> LanguageRules:
        """Return the rules for *language*; unknown ids get an empty camel rule set."""
        key = self.resolve(language)
        rules = self._rules.get(key)
        if rules is None:
            return LanguageRules(language=key)
        return rules

    def has(self, language: str) -> bool:
        return self.resolve(language) in self._rules

    def available_languages(self) -> list[str]:
        return sorted(self._rules)

    def default_style(self, language: str) -> NamingStyle:
        return self.get(language).default_style

    def __repr__(self) -> str:
        return f"LanguageRegistry([{', '.join(sorted(self._rules))}])"


registry = LanguageRegistry()
