"""Trace message and line rendering."""

from __future__ import annotations

FN_TOKEN = "$FN"


def render_template(template: str, args: tuple[object, ...]) -> str:
    """Render a printf-style template without ever raising.

    A template that cannot be rendered with no arguments is returned as-is.
    When arguments don't fit the template, the raw template is followed by
    an ``%!(EXTRA type=value, ...)`` marker so the mistake shows in the output.
    Arguments whose ``__str__``/``__repr__`` raise are rendered as a
    placeholder instead.
    """
    try:
        return template % args
    except Exception:
        if not args:
            return template
        extra = ", ".join(f"{type(arg).__name__}={_safe_str(arg)}" for arg in args)
        return f"{template}%!(EXTRA {extra})"


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__} str failed>"


def build_message(args: tuple[object, ...], caller_name: str) -> str:
    """Compute the trace message for an ``enter`` call.

    With no arguments, or a non-string first argument, the message is the
    caller's name. Otherwise the first argument is rendered as a template
    with the rest. Any ``$FN`` in the result becomes the caller's name.
    """
    message = caller_name
    if args and isinstance(args[0], str):
        message = render_template(args[0], args[1:])
    return message.replace(FN_TOKEN, caller_name)


def render_prefix(depth: int, spaces_per_indent: int, show_depth_value: bool) -> str:
    spaces = " " * (depth * spaces_per_indent)
    if show_depth_value:
        return f"[{depth:2d}]{spaces}"
    return spaces


def format_line(prefix: str, label: str, message: str) -> str:
    return f"{prefix}{label}{message}\n"
