"""Prompt templates for identifier-name generation.

Each prompt is a plain string template.  The generator fills placeholders
before sending the request to the model endpoint.
"""

from __future__ import annotations

from smart_variables.models import IntentType, NamingStyle

# ────────────────────────────────────────────────────────────────────
# Name generation
# ────────────────────────────────────────────────────────────────────

NAME_TASK = """\
Generate identifier names for the meaning below.

Meaning: {meaning}
Naming style: {style}
Intent: {intent}
{context_info}
Requirements:
1. Generate {count} {intent} names in {style} style.
2. Decide from the meaning whether it describes an action or a property:
   - actions ("get the name", "calculate total", "check status") → method names starting with a verb
   - properties ("user name", "product price", "system status") → noun-like property names
3. Language-specific requirements:
{guidance}
4. One name per line. No numbering, no explanations, no extra symbols.
5. Prefer short, unambiguous names; common abbreviations (info, config, temp) are fine.
6. Avoid overly generic words such as data, item or value.

Example format:
{examples}

Generate the names now:"""

STYLE_DESCRIPTIONS: dict[NamingStyle, str] = {
    NamingStyle.CAMEL: "camelCase, e.g. myVariableName – methods, properties and locals in JavaScript, Java and similar languages.",
    NamingStyle.PASCAL: "PascalCase, e.g. MyVariableName – class names, constructors and types.",
    NamingStyle.SNAKE: "snake_case, e.g. my_variable_name – variables and functions in Python, C and similar languages.",
    NamingStyle.UPPER: "UPPER_SNAKE_CASE, e.g. MY_VARIABLE_NAME – constants and macros.",
}

EXAMPLES: dict[IntentType, dict[NamingStyle, list[str]]] = {
    IntentType.METHOD: {
        NamingStyle.CAMEL: ["getName", "getUserInfo", "calculateTotal", "checkStatus"],
        NamingStyle.PASCAL: ["GetName", "GetUserInfo", "CalculateTotal", "CheckStatus"],
        NamingStyle.SNAKE: ["get_name", "get_user_info", "calculate_total", "check_status"],
        NamingStyle.UPPER: ["GET_NAME", "GET_USER_INFO", "CALCULATE_TOTAL", "CHECK_STATUS"],
    },
    IntentType.PROPERTY: {
        NamingStyle.CAMEL: ["userName", "userInfo", "totalAmount", "currentStatus"],
        NamingStyle.PASCAL: ["UserName", "UserInfo", "TotalAmount", "CurrentStatus"],
        NamingStyle.SNAKE: ["user_name", "user_info", "total_amount", "current_status"],
        NamingStyle.UPPER: ["USER_NAME", "USER_INFO", "TOTAL_AMOUNT", "CURRENT_STATUS"],
    },
}

GENERIC_GUIDANCE = "   - Use English names that follow common programming conventions"
UNKNOWN_LANGUAGE_GUIDANCE = "   - Use English names that follow this language's naming conventions"

_CAMEL_METHOD_GUIDANCE = (
    "   - Start function names with a verb, e.g. getName(), calculateTotal(), checkStatus()\n"
    "   - Boolean functions start with is/has/can, e.g. isValid(), hasPermission()"
)
_CAMEL_PROPERTY_GUIDANCE = (
    "   - Use nouns for variables, e.g. userName, totalAmount, currentStatus\n"
    "   - Boolean variables read as adjectives, e.g. isActive, isEnabled"
)

LANGUAGE_GUIDANCE: dict[str, dict[IntentType, str]] = {
    "java": {
        IntentType.METHOD: (
            "   - Method names start with a verb, e.g. getName(), calculateTotal(), checkStatus()\n"
            "   - Boolean methods start with is/has/can, e.g. isValid(), hasPermission()"
        ),
        IntentType.PROPERTY: (
            "   - Member variables are nouns, e.g. userName, totalAmount, currentStatus\n"
            "   - Boolean members read as adjectives, e.g. isActive, isEnabled"
        ),
    },
    "python": {
        IntentType.METHOD: (
            "   - Function names start with a verb, e.g. get_name(), calculate_total(), check_status()\n"
            "   - Boolean functions start with is/has/can, e.g. is_valid(), has_permission()"
        ),
        IntentType.PROPERTY: (
            "   - Variables are nouns, e.g. user_name, total_amount, current_status\n"
            "   - Boolean variables read as adjectives, e.g. is_active, is_enabled"
        ),
    },
    "javascript": {
        IntentType.METHOD: _CAMEL_METHOD_GUIDANCE,
        IntentType.PROPERTY: _CAMEL_PROPERTY_GUIDANCE,
    },
    "typescript": {
        IntentType.METHOD: (
            "   - Method names start with a verb, e.g. getName(), calculateTotal(), checkStatus()\n"
            "   - Boolean methods start with is/has/can, e.g. isValid(), hasPermission()"
        ),
        IntentType.PROPERTY: (
            "   - Properties are nouns, e.g. userName, totalAmount, currentStatus\n"
            "   - Boolean properties read as adjectives, e.g. isActive, isEnabled"
        ),
    },
}

# Verbs (English and Chinese) that mark a meaning as an action.
ACTION_KEYWORDS: tuple[str, ...] = (
    "获取", "取得", "得到", "拿到", "查找", "查询", "搜索", "寻找",
    "计算", "统计", "求和", "累加", "处理", "执行", "运行",
    "检查", "验证", "校验", "判断", "确认", "测试",
    "创建", "生成", "构建", "建立", "新建", "添加",
    "更新", "修改", "编辑", "改变", "设置", "配置",
    "删除", "移除", "清除", "销毁", "释放",
    "发送", "传输", "推送", "提交", "保存", "存储",
    "加载", "读取", "解析", "转换", "格式化",
    "get", "fetch", "find", "search", "query", "retrieve",
    "calculate", "compute", "process", "execute", "run",
    "check", "validate", "verify", "test", "confirm",
    "create", "generate", "build", "make", "add",
    "update", "modify", "edit", "change", "set",
    "delete", "remove", "clear", "destroy",
    "send", "submit", "save", "store",
    "load", "read", "parse", "convert", "format",
)
