"""Prompt construction for the name generator."""

from __future__ import annotations

import re

from smart_variables.models import GenerationContext, IntentType, NamingStyle
from smart_variables.utils.prompts import (
    ACTION_KEYWORDS,
    EXAMPLES,
    GENERIC_GUIDANCE,
    LANGUAGE_GUIDANCE,
    NAME_TASK,
    UNKNOWN_LANGUAGE_GUIDANCE,
)

_ASCII_KEYWORDS = frozenset(k for k in ACTION_KEYWORDS if k.isascii())
_CJK_KEYWORDS = tuple(k for k in ACTION_KEYWORDS if not k.isascii())
_WORD = re.compile(r"[a-z]+")


def detect_intent(meaning: str) -> IntentType:
    """Classify *meaning* as an action (method name) or a property.

    English verbs must appear as whole words so that e.g. "address" does
    not read as "add"; Chinese verbs have no word boundaries and are
    matched as substrings.
    """
    lowered = meaning.lower()
    if any(word in _ASCII_KEYWORDS for word in _WORD.findall(lowered)):
        return IntentType.METHOD
    if any(keyword in meaning for keyword in _CJK_KEYWORDS):
        return IntentType.METHOD
    return IntentType.PROPERTY


def examples_for(style: NamingStyle, intent: IntentType) -> str:
    """Two example names in *style* for *intent*, comma separated."""
    return ", ".join(EXAMPLES[intent][style][:2])


def language_guidance(language: str | None, intent: IntentType) -> str:
    if not language:
        return GENERIC_GUIDANCE
    per_language = LANGUAGE_GUIDANCE.get(language.lower())
    if per_language is None:
        return UNKNOWN_LANGUAGE_GUIDANCE
    return per_language[intent]


def build_prompt(
    meaning: str,
    style: NamingStyle,
    count: int,
    context: GenerationContext | None = None,
) -> str:
    intent = detect_intent(meaning)

    context_info = ""
    if context is not None:
        if context.language:
            context_info += f"Programming language: {context.language}\n"
        if context.current_line:
            context_info += f"Current line of code: {context.current_line.strip()}\n"

    return NAME_TASK.format(
        meaning=meaning.strip(),
        style=style.value,
        intent=intent.value,
        context_info=context_info,
        count=count,
        guidance=language_guidance(context.language if context else None, intent),
        examples=examples_for(style, intent),
    )
