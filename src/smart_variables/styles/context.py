"""Context window builder.

Gathers the lines around a target line and runs the language's structural
predicates and extraction patterns over them, producing one
:class:`~smart_variables.models.ContextSnapshot` per call.
"""

from __future__ import annotations

from collections.abc import Sequence

from smart_variables.models import ContextSnapshot, IdentifierRecord
from smart_variables.styles.classifier import classify
from smart_variables.styles.rules import LanguageRules, registry
from smart_variables.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_RADIUS = 10


def build_context(
    lines: Sequence[str],
    target_index: int,
    language: str,
    radius: int = DEFAULT_RADIUS,
) -> ContextSnapshot:
    """Build a snapshot of the window ``[target - radius, target + radius]``.

    The window is clipped to the document.  An empty document or an
    out-of-range *target_index* gives an empty snapshot instead of raising.
    """
    line_count = len(lines)
    if line_count == 0 or not 0 <= target_index < line_count:
        return ContextSnapshot()

    start = max(0, target_index - radius)
    end = min(line_count - 1, target_index + radius)

    snapshot = ContextSnapshot(
        target_line=lines[target_index],
        surrounding_lines=[lines[i] for i in range(start, end + 1) if i != target_index],
    )
    rules = registry.get(language)

    _scan_structure(snapshot, rules)
    _collect_identifiers(snapshot, rules)

    logger.debug(
        "context.built",
        language=rules.language,
        window=(start, end),
        identifiers=len(snapshot.existing_identifiers),
    )
    return snapshot


def _scan_structure(snapshot: ContextSnapshot, rules: LanguageRules) -> None:
    """OR structural flags over the target line and every surrounding line."""
    for line in (snapshot.target_line, *snapshot.surrounding_lines):
        if rules.is_class(line):
            snapshot.in_class = True
            snapshot.class_depth += 1
        if rules.is_function(line):
            snapshot.in_function = True
            snapshot.function_depth += 1
        if rules.is_interface(line):
            snapshot.in_interface = True
        if rules.is_enum(line):
            snapshot.in_enum = True
        if rules.is_constant_context(line):
            snapshot.is_constant_context = True
        if rules.is_type_definition(line):
            snapshot.is_type_definition = True


def _collect_identifiers(snapshot: ContextSnapshot, rules: LanguageRules) -> None:
    # The target line is left out: it is where the new name goes.
    for line in snapshot.surrounding_lines:
        for name in rules.extract_identifiers(line):
            snapshot.existing_identifiers.append(IdentifierRecord(name=name, style=classify(name)))
