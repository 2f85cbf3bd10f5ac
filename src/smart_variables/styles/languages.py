"""Per-language rule tables.

Importing this module registers every table with
:data:`smart_variables.styles.rules.registry`.  Structural patterns are
compiled once and reused by the direct-pattern lists, so a line is never
"a class" for the context window but "not a class" for the direct check.

All trigger patterns are case-sensitive and anchored at the start of the
line with leading whitespace allowed.  Extraction patterns are anchored too,
except the ones that pick a type name out of its declaration keyword.
"""

from __future__ import annotations

import re

from smart_variables.models import NamingStyle
from smart_variables.styles.rules import (
    DirectPattern,
    LanguageRules,
    LinePattern,
    registry,
)

_re = re.compile

# Statement keywords that otherwise look like "<type> <name>".
_NOT_KEYWORD = r"(?!(?:return|new|throw|else|case|goto|delete|await|yield|typedef)\b)"


# ────────────────────────────────────────────────────────────────────
# Java
# ────────────────────────────────────────────────────────────────────

_JAVA_MODS = r"(?:(?:public|private|protected|abstract|static|final|sealed|non-sealed|strictfp)\s+)*"
# Generic arguments may hold commas and spaces: Map<String, List<Integer>>.
_JAVA_TYPE = r"[\w.]+(?:<[\w<>\[\].?,\s]*>)?(?:\[\s*\])*"

_JAVA_CLASS = _re(rf"^\s*{_JAVA_MODS}class\s+\w+")
_JAVA_INTERFACE = _re(r"^\s*(?:(?:public|private|protected|abstract|static|sealed)\s+)*@?interface\s+\w+")
_JAVA_ENUM = _re(r"^\s*(?:(?:public|private|protected|static)\s+)*enum\s+\w+")
_JAVA_CONSTANT = _re(r"^\s*(?:(?:public|private|protected)\s+)?(?:static\s+final|final\s+static)\s+")
_JAVA_FUNCTION = _re(
    r"^\s*(?:(?:public|private|protected|static|final|abstract|synchronized|native|default)\s+)*"
    rf"{_NOT_KEYWORD}{_JAVA_TYPE}\s+\w+\s*\("
)
_JAVA_METHOD_DECL = _re(
    rf"^\s*(?:(?:public|private|protected)\s+)?(?:static\s+)?{_NOT_KEYWORD}"
    rf"{_JAVA_TYPE}\s+\w+\s*\([^)]*\)\s*[{{;]"
)
_JAVA_FIELD_DECL = _re(
    rf"^\s*(?:(?:public|private|protected)\s+)?(?:static\s+)?(?!final\b){_NOT_KEYWORD}"
    rf"{_JAVA_TYPE}\s+\w+\s*[=;]"
)
_JAVA_MEMBER = _re(r"^\s*(?:(?:public|private|protected)\s+)?(?:static\s+)?(?!.*\([^)]*\))\w+\s+\w+\s*[=;]")
_ANNOTATION = _re(r"^\s*@\w+")

registry.register(
    LanguageRules(
        language="java",
        default_style=NamingStyle.CAMEL,
        class_patterns=(_JAVA_CLASS,),
        function_patterns=(_JAVA_FUNCTION,),
        interface_patterns=(_JAVA_INTERFACE,),
        enum_patterns=(_JAVA_ENUM,),
        constant_patterns=(_JAVA_CONSTANT,),
        direct_patterns=(
            DirectPattern(_JAVA_CONSTANT, NamingStyle.UPPER),
            DirectPattern(_JAVA_CLASS, NamingStyle.PASCAL),
            DirectPattern(_JAVA_INTERFACE, NamingStyle.PASCAL),
            DirectPattern(_JAVA_ENUM, NamingStyle.PASCAL),
            DirectPattern(_JAVA_METHOD_DECL, NamingStyle.CAMEL),
            DirectPattern(_JAVA_FIELD_DECL, NamingStyle.CAMEL),
            DirectPattern(_ANNOTATION, NamingStyle.CAMEL),
        ),
        member_patterns=(_JAVA_MEMBER,),
        extraction_patterns=(
            LinePattern(_re(
                r"^\s*(?:(?:public|private|protected|static|final|transient|volatile)\s+)*"
                rf"{_NOT_KEYWORD}{_JAVA_TYPE}\s+(\w+)\s*[=;]"
            )),
            LinePattern(_re(
                r"^\s*(?:(?:public|private|protected|static|final|abstract|synchronized)\s+)*"
                rf"{_NOT_KEYWORD}{_JAVA_TYPE}\s+(\w+)\s*\("
            )),
            LinePattern(_re(r"\b(?:class|interface|enum)\s+(\w+)")),
        ),
    ),
)


# ────────────────────────────────────────────────────────────────────
# Python
# ────────────────────────────────────────────────────────────────────

_PY_CLASS = _re(r"^\s*class\s+\w+")
_PY_FUNCTION = _re(r"^\s*(?:async\s+)?def\s+\w+\s*\(")
# Module level only: an indented ALL_CAPS assignment is not a constant context.
_PY_CONSTANT = _re(r"^[A-Z][A-Z0-9_]*\s*(?::[^=]*)?=(?!=)")
_PY_NOT_KEYWORD = r"(?!(?:if|elif|else|while|for|try|except|finally|with|lambda|return)\b)"

registry.register(
    LanguageRules(
        language="python",
        default_style=NamingStyle.SNAKE,
        class_patterns=(_PY_CLASS,),
        function_patterns=(_PY_FUNCTION,),
        constant_patterns=(_PY_CONSTANT,),
        direct_patterns=(
            DirectPattern(_PY_CLASS, NamingStyle.PASCAL),
            DirectPattern(_PY_CONSTANT, NamingStyle.UPPER),
            DirectPattern(_re(r"^\s*_\w+\s*(?::[^=]*)?=(?!=)"), NamingStyle.SNAKE),
            DirectPattern(_re(r"^\s*(?:async\s+)?def\s+__\w+__"), NamingStyle.SNAKE),
        ),
        extraction_patterns=(
            # Leading underscores are privacy markers, not part of the style.
            LinePattern(_re(rf"^\s*(?:self\.|cls\.)?(?!__\w+__)_*{_PY_NOT_KEYWORD}([A-Za-z]\w*)\s*(?::[^=]*)?=(?!=)")),
            LinePattern(_re(r"^\s*(?:async\s+)?def\s+(?!__\w+__)_*([A-Za-z]\w*)\s*\(")),
            LinePattern(_re(r"^\s*class\s+(\w+)")),
        ),
    ),
    aliases=("py",),
)


# ────────────────────────────────────────────────────────────────────
# JavaScript / TypeScript
# ────────────────────────────────────────────────────────────────────

_ES_CLASS = _re(r"^\s*(?:export\s+)?(?:default\s+)?(?:abstract\s+)?class\s+\w+")
_ES_FUNCTION = _re(r"^\s*(?:export\s+)?(?:default\s+)?(?:async\s+)?function\s*\*?\s*\w+\s*\(")
_ES_ARROW = _re(r"^\s*(?:export\s+)?(?:const|let|var)\s+\w+\s*=\s*(?:async\s+)?(?:\(|\w+\s*=>|function\b)")
_ES_CONSTANT = _re(r"^\s*(?:export\s+)?const\s+[A-Z][A-Z0-9_]*\s*(?::[^=]*)?=(?!=)")
_ES_COMPONENT_FUNCTION = _re(r"^\s*(?:export\s+)?(?:default\s+)?function\s+[A-Z]\w*")
_ES_COMPONENT_ARROW = _re(r"^\s*(?:export\s+)?(?:const|let|var)\s+[A-Z]\w*\s*=\s*\(")
_TS_INTERFACE = _re(r"^\s*(?:export\s+)?(?:declare\s+)?interface\s+\w+")
_TS_ENUM = _re(r"^\s*(?:export\s+)?(?:declare\s+)?(?:const\s+)?enum\s+\w+")
_TS_TYPE = _re(r"^\s*(?:export\s+)?(?:declare\s+)?type\s+\w+")
_TS_MEMBER = _re(r"^\s*(?:(?:public|private|protected|readonly|static|declare)\s+)*\w+\??\s*:\s*")

_ES_EXTRACTION = (
    LinePattern(_re(r"\b(?:const|let|var)\s+(\w+)\s*(?::[^=]*)?=")),
    LinePattern(_re(r"\bfunction\s*\*?\s*(\w+)\s*\(")),
    # object / class properties
    LinePattern(_re(r"(\w+)\??\s*:\s*\w+")),
)


def _ecmascript(language: str, *, typed: bool) -> LanguageRules:
    type_keyword_patterns = (_TS_INTERFACE, _TS_ENUM, _TS_TYPE) if typed else ()
    declared_types = r"(?:class|interface|enum|type)" if typed else r"class"
    return LanguageRules(
        language=language,
        default_style=NamingStyle.CAMEL,
        class_patterns=(_ES_CLASS,),
        function_patterns=(_ES_FUNCTION, _ES_ARROW),
        interface_patterns=(_TS_INTERFACE,) if typed else (),
        enum_patterns=(_TS_ENUM,) if typed else (),
        constant_patterns=(_ES_CONSTANT,),
        type_definition_patterns=(_TS_TYPE,) if typed else (),
        direct_patterns=(
            DirectPattern(_ES_CONSTANT, NamingStyle.UPPER),
            DirectPattern(_ES_CLASS, NamingStyle.PASCAL),
            *(DirectPattern(p, NamingStyle.PASCAL) for p in type_keyword_patterns),
            DirectPattern(_ES_COMPONENT_FUNCTION, NamingStyle.PASCAL),
            DirectPattern(_ES_COMPONENT_ARROW, NamingStyle.PASCAL),
            DirectPattern(_ANNOTATION, NamingStyle.CAMEL),
        ),
        member_patterns=(_TS_MEMBER,) if typed else (),
        extraction_patterns=(
            *_ES_EXTRACTION,
            LinePattern(_re(rf"\b{declared_types}\s+(\w+)")),
        ),
    )


registry.register(_ecmascript("javascript", typed=False), aliases=("js", "jsx", "javascriptreact"))
registry.register(_ecmascript("typescript", typed=True), aliases=("ts", "tsx", "typescriptreact"))


# ────────────────────────────────────────────────────────────────────
# C / C++
# ────────────────────────────────────────────────────────────────────

_C_DEFINE = _re(r"^\s*#\s*define\s+[A-Z][A-Z0-9_]*\b")
_C_FUNCTION = _re(
    r"^\s*(?:(?:static|inline|extern|const|unsigned|signed|virtual|constexpr)\s+)*"
    rf"{_NOT_KEYWORD}[\w:<>]+[\s*&]+[\w:~]+\s*\("
)
_C_ENUM = _re(r"^\s*(?:typedef\s+)?enum\b(?:\s+(?:class\s+|struct\s+)?\w+)?\s*(?::\s*\w+\s*)?\{?\s*$")
_C_EXTRACTION = (
    LinePattern(_re(r"^\s*#\s*define\s+(\w+)")),
    LinePattern(_re(
        r"^\s*(?:(?:static|inline|extern|const|unsigned|signed|virtual|constexpr)\s+)*"
        rf"{_NOT_KEYWORD}[\w:<>]+[\s*&]+(\w+)\s*\("
    )),
    LinePattern(_re(
        r"^\s*(?:(?:static|const|extern|unsigned|signed|volatile|struct|register|auto)\s+)*"
        rf"{_NOT_KEYWORD}[\w:<>]+[\s*&]+(\w+)\s*(?:\[[^\]]*\]\s*)?[=;]"
    )),
    LinePattern(_re(r"\b(?:struct|union|enum|class)\s+(\w+)")),
)


def _c_family(language: str, *, record_keywords: str) -> LanguageRules:
    record = _re(
        rf"^\s*(?:template\s*<[^>]*>\s*)?(?:typedef\s+)?(?:{record_keywords})\b"
        r"(?:\s+\w+)?\s*(?:final\s*)?(?::[^{;]*)?\{?\s*$"
    )
    return LanguageRules(
        language=language,
        default_style=NamingStyle.SNAKE,
        class_patterns=(record,),
        function_patterns=(_C_FUNCTION,),
        enum_patterns=(_C_ENUM,),
        direct_patterns=(
            DirectPattern(_C_DEFINE, NamingStyle.UPPER),
            DirectPattern(_re(rf"^\s*(?:typedef\s+)?(?:{record_keywords}|enum)\s+"), NamingStyle.PASCAL),
        ),
        extraction_patterns=_C_EXTRACTION,
    )


registry.register(_c_family("c", record_keywords="struct|union"))
registry.register(_c_family("cpp", record_keywords="class|struct|union"), aliases=("c++", "cc", "cxx", "hpp"))


# ────────────────────────────────────────────────────────────────────
# C#
# ────────────────────────────────────────────────────────────────────

_CS_MODS = (
    r"(?:(?:public|private|protected|internal|static|abstract|sealed|partial|readonly"
    r"|virtual|override|async|new|unsafe|extern)\s+)*"
)
_CS_TYPE = r"[\w<>\[\],.?]+"
_CS_NOT_KEYWORD = r"(?!(?:return|new|throw|else|case|class|struct|interface|enum|record|namespace|using|await)\b)"

_CS_CLASS = _re(rf"^\s*{_CS_MODS}(?:class|struct|record)\s+\w+")
_CS_INTERFACE = _re(rf"^\s*{_CS_MODS}interface\s+\w+")
_CS_ENUM = _re(rf"^\s*{_CS_MODS}enum\s+\w+")
_CS_CONSTANT = _re(r"^\s*(?:(?:public|private|protected|internal|new)\s+)*const\s+")
_CS_FUNCTION = _re(rf"^\s*{_CS_MODS}{_CS_NOT_KEYWORD}{_CS_TYPE}\s+\w+\s*\(")
_CS_PROPERTY = _re(rf"^\s*{_CS_MODS}{_CS_NOT_KEYWORD}{_CS_TYPE}\s+\w+\s*\{{\s*(?:get|set|init)\b")

registry.register(
    LanguageRules(
        language="csharp",
        default_style=NamingStyle.CAMEL,
        class_patterns=(_CS_CLASS,),
        function_patterns=(_CS_FUNCTION,),
        interface_patterns=(_CS_INTERFACE,),
        enum_patterns=(_CS_ENUM,),
        constant_patterns=(_CS_CONSTANT,),
        direct_patterns=(
            DirectPattern(_CS_CLASS, NamingStyle.PASCAL),
            DirectPattern(_CS_INTERFACE, NamingStyle.PASCAL),
            DirectPattern(_CS_ENUM, NamingStyle.PASCAL),
            # C# constants are PascalCase by convention.
            DirectPattern(_CS_CONSTANT, NamingStyle.PASCAL),
            DirectPattern(_CS_PROPERTY, NamingStyle.PASCAL),
        ),
        member_patterns=(_re(r"^\s*(?:(?:public|private|protected|internal)\s+)?(?:static\s+)?\w+\s+[A-Z]\w*"),),
        extraction_patterns=(
            LinePattern(_re(rf"^\s*{_CS_MODS}{_CS_NOT_KEYWORD}{_CS_TYPE}\s+(\w+)\s*[=;]")),
            LinePattern(_re(rf"^\s*{_CS_MODS}{_CS_NOT_KEYWORD}{_CS_TYPE}\s+(\w+)\s*\(")),
            LinePattern(_re(rf"^\s*{_CS_MODS}{_CS_NOT_KEYWORD}{_CS_TYPE}\s+(\w+)\s*\{{")),
            LinePattern(_re(r"\b(?:class|struct|interface|enum|record)\s+(\w+)")),
        ),
    ),
    aliases=("cs", "c#"),
)


# ────────────────────────────────────────────────────────────────────
# Default-only languages
# ────────────────────────────────────────────────────────────────────

registry.register(LanguageRules(language="ruby", default_style=NamingStyle.SNAKE), aliases=("rb",))
registry.register(LanguageRules(language="rust", default_style=NamingStyle.SNAKE), aliases=("rs",))
registry.register(LanguageRules(language="kotlin", default_style=NamingStyle.CAMEL), aliases=("kt",))
registry.register(LanguageRules(language="swift", default_style=NamingStyle.CAMEL))
