"""Identifier style classifier – decides a naming style from a name's shape."""

from __future__ import annotations

import re

from smart_variables.models import NamingStyle

# Checked in order; the first pattern that matches decides.
_SHAPES: tuple[tuple[re.Pattern[str], NamingStyle], ...] = (
    (re.compile(r"^[A-Z][A-Z0-9_]*$"), NamingStyle.UPPER),
    (re.compile(r"^[A-Z][a-zA-Z0-9]*$"), NamingStyle.PASCAL),
    (re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)*$"), NamingStyle.SNAKE),
)


def classify(name: str) -> NamingStyle:
    """Return the naming style of *name*.

    Total: anything that is not upper, pascal or snake shaped is camel.
    Single letters follow the same rules, so ``"X"`` is upper and ``"x"``
    is snake.
    """
    for pattern, style in _SHAPES:
        if pattern.fullmatch(name):
            return style
    return NamingStyle.CAMEL
