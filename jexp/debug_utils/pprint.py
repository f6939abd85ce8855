import json
from collections.abc import Mapping

from jexp import MACRO_SIGIL
from jexp.evaluation.special_forms import SPECIAL_FORMS
from jexp.evaluation.special_forms.quote_forms import QUOTE, QUASIQUOTE, UNQUOTE
from jexp.types.binding import Binding, Macro
from jexp.types.closure import Closure
from jexp.types.undefined import UndefinedType

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_CLOSURE = "\033[92m"
COLOR_PY_CALLABLE = "\033[95m"
COLOR_QUASIQUOTE = "\033[96m"
COLOR_UNQUOTE = "\033[91m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_MACRO = "\033[93m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 8,
    "color_symbols": True,
    "color_closures": True,
    "color_callables": True,
    "color_special_forms": True,
    "color_quasiquote": True,
    "color_unquote": True,
    "color_macros": True,
}

PLAIN_OPTIONS = {key: (False if key.startswith("color_") else value)
                 for key, value in DEFAULT_OPTIONS.items()}

FORM_KEYS = {key for key, _ in SPECIAL_FORMS} | {"in", "body", "args", "if", "then", "else"}


def _paint(text: str, color: str, flag: str, options: dict) -> str:
    if options.get(flag, True):
        return f"{color}{text}{RESET}"
    return text


# ----------------- Colorize utility -----------------
def colorize_key(key, literal: bool, options: dict = DEFAULT_OPTIONS) -> str:
    text = json.dumps(key) if isinstance(key, str) else json.dumps(str(key))
    if literal:
        return text
    if key == UNQUOTE:
        return _paint(text, COLOR_UNQUOTE, "color_unquote", options)
    if key == QUASIQUOTE:
        return _paint(text, COLOR_QUASIQUOTE, "color_quasiquote", options)
    if key in FORM_KEYS or key == QUOTE:
        return _paint(text, COLOR_SPECIAL_FORM, "color_special_forms", options)
    if isinstance(key, str) and key.startswith(MACRO_SIGIL):
        return _paint(text, COLOR_MACRO, "color_macros", options)
    return _paint(text, COLOR_SYMBOL, "color_symbols", options)


def colorize_atom(obj, literal: bool, options: dict = DEFAULT_OPTIONS) -> str:
    if isinstance(obj, Closure):
        return _paint(f"<closure {obj.params}>", COLOR_CLOSURE, "color_closures", options)
    if isinstance(obj, Macro):
        return _paint(repr(obj), COLOR_MACRO, "color_macros", options)
    if isinstance(obj, Binding) or callable(obj):
        fn = obj.fn if isinstance(obj, Binding) else obj
        name = getattr(fn, "__name__", None) or repr(fn)
        return _paint(f"<callable {name}>", COLOR_PY_CALLABLE, "color_callables", options)
    if isinstance(obj, UndefinedType):
        return "undefined"
    if isinstance(obj, str):
        text = json.dumps(obj)
        if literal:
            return _paint(text, COLOR_QUASIQUOTE, "color_quasiquote", options) \
                if options.get("_in_quasiquote") else text
        return _paint(text, COLOR_SYMBOL, "color_symbols", options)
    return json.dumps(obj, default=repr)


# ----------------- Pretty printer -----------------
def format_expr(
    expr,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
    literal: bool = False,
) -> str:
    """
    Render an expression as indented JSON-like text.

    Strings in code position are symbols; below a quote, or a quasiquote
    outside its escapes, everything is literal data.
    """
    pad = "  " * indent
    if _current_depth >= options.get("max_depth", 8):
        return "…"

    if isinstance(expr, (list, tuple)):
        if not expr:
            return "[]"
        parts = [format_expr(e, indent + 1, options, _current_depth + 1, literal) for e in expr]
        return _layout("[", "]", parts, indent, pad, options)

    if isinstance(expr, Mapping):
        if not expr:
            return "{}"
        parts = []
        for key, value in expr.items():
            child_options, child_literal = options, literal
            if not literal and key == QUOTE:
                child_literal = True
            elif not literal and key == QUASIQUOTE:
                child_literal = True
                child_options = {**options, "_in_quasiquote": True}
            elif literal and options.get("_in_quasiquote") and key == UNQUOTE:
                child_literal = False
                child_options = {k: v for k, v in options.items() if k != "_in_quasiquote"}
            escape = literal and options.get("_in_quasiquote") and key == UNQUOTE
            key_text = colorize_key(key, literal and not escape, options)
            value_text = format_expr(value, indent + 1, child_options, _current_depth + 1, child_literal)
            parts.append(f"{key_text}: {value_text}")
        return _layout("{", "}", parts, indent, pad, options)

    return colorize_atom(expr, literal, options)


def _layout(open_: str, close: str, parts: list[str], indent: int, pad: str, options: dict) -> str:
    single_line = open_ + ", ".join(parts) + close
    if len(single_line) + indent * 2 <= options.get("max_line_length", 80) and "\n" not in single_line:
        return single_line
    inner = ",\n".join("  " * (indent + 1) + part for part in parts)
    return f"{open_}\n{inner}\n{pad}{close}"


def pprint_expr(expr, options: dict = DEFAULT_OPTIONS) -> None:
    print(format_expr(expr, options=options))
