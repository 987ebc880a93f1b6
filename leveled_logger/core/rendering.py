"""
Message rendering

Every level method funnels its arguments through one of these three
functions before the message reaches the write path.
"""

from typing import Any


def render(*values: Any) -> str:
    """Concatenate str() of every value, no separator."""
    return "".join(str(value) for value in values)


def render_line(*values: Any) -> str:
    """Join values with single spaces and terminate with a newline."""
    return " ".join(str(value) for value in values) + "\n"


def render_format(template: str, *args: Any) -> str:
    """
    printf-style substitution.

    With no arguments the template is returned as-is, so a literal "%"
    in a plain message is safe.

    Example:
        render_format("%s took %.2fs", "load", 1.5)  # "load took 1.50s"
    """
    if not args:
        return template
    return template % args
