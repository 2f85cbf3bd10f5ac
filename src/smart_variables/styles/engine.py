"""Style inference engine.

Decision procedure, first applicable rule wins:

1. a direct pattern on the target line decides on its own;
2. without a context snapshot, the language default;
3. type alias / interface context, or a class-member line inside a class → pascal;
4. constant or enum context → upper;
5. a strict majority (> 50 %) among nearby identifiers;
6. the language default.

Every input yields a style; nothing here raises.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from smart_variables.models import ContextSnapshot, IdentifierRecord, NamingStyle
from smart_variables.styles.context import DEFAULT_RADIUS, build_context
from smart_variables.styles.rules import registry
from smart_variables.utils.logging import get_logger

logger = get_logger(__name__)


def default_style(language: str) -> NamingStyle:
    """The naming style a language uses when nothing else is known."""
    return registry.default_style(language)


def majority_style(identifiers: Sequence[IdentifierRecord]) -> NamingStyle | None:
    """Return the style held by strictly more than half of *identifiers*.

    Ties on the top count go to the style seen first, but a tie can never
    hold a strict majority, so a tie always returns ``None``.
    """
    if not identifiers:
        return None
    counts = Counter(record.style for record in identifiers)
    dominant, count = counts.most_common(1)[0]
    if count * 2 > len(identifiers):
        return dominant
    return None


def infer(
    language: str,
    target_line: str,
    snapshot: ContextSnapshot | None = None,
) -> NamingStyle:
    """Pick the naming style for a new identifier on *target_line*."""
    rules = registry.get(language)

    direct = rules.direct_style(target_line)
    if direct is not None:
        logger.debug("infer.direct", language=rules.language, style=direct.value)
        return direct

    if snapshot is None:
        return rules.default_style

    if (
        snapshot.is_type_definition
        or snapshot.in_interface
        or (snapshot.in_class and rules.is_class_member(target_line))
    ):
        logger.debug("infer.structural", language=rules.language, style=NamingStyle.PASCAL.value)
        return NamingStyle.PASCAL

    if snapshot.is_constant_context or snapshot.in_enum:
        logger.debug("infer.structural", language=rules.language, style=NamingStyle.UPPER.value)
        return NamingStyle.UPPER

    voted = majority_style(snapshot.existing_identifiers)
    if voted is not None:
        logger.debug(
            "infer.majority",
            language=rules.language,
            style=voted.value,
            sample=len(snapshot.existing_identifiers),
        )
        return voted

    return rules.default_style


def infer_at(
    lines: Sequence[str],
    line_index: int,
    language: str,
    radius: int = DEFAULT_RADIUS,
) -> NamingStyle:
    """Build the context window around *line_index* and infer from it.

    Out-of-range indices fall back to the language default.
    """
    if not 0 <= line_index < len(lines):
        return default_style(language)
    snapshot = build_context(lines, line_index, language, radius=radius)
    return infer(language, snapshot.target_line, snapshot)
