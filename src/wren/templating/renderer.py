"""Literal ``{{NAME}}`` placeholder substitution.

Deliberately not a template language: no expressions, no escaping, no
recursion. Values are trusted HTML supplied by the page registry, never
by the client.
"""

import re
from collections.abc import Mapping


def placeholder(name: str) -> str:
    """Return the literal token for *name*, e.g. ``{{TITLE}}``."""
    return "{{" + name + "}}"


def render(template: str, values: Mapping[str, str | None]) -> str:
    """Replace every ``{{key}}`` in *template* with ``values[key]``.

    Falsy values render as the empty string. Substitution is a single
    pass over the original template, so a value that itself contains a
    ``{{MARKER}}`` is emitted as-is. Placeholders with no matching key
    stay verbatim.

    Example::

        >>> render("<h1>{{TITLE}}</h1>{{MISSING}}", {"TITLE": "Home"})
        '<h1>Home</h1>{{MISSING}}'
    """
    if not values:
        return template

    pattern = re.compile(
        r"\{\{(" + "|".join(re.escape(key) for key in values) + r")\}\}"
    )
    return pattern.sub(lambda m: values[m.group(1)] or "", template)
