"""`${name}` placeholder substitution for declaration templates."""

from __future__ import annotations

import re
from typing import Mapping

TemplateValues = Mapping[str, str]


def placeholder(key: str) -> str:
    """Return the placeholder token for ``key``."""
    return "${" + key + "}"


def apply_template(template: str, values: TemplateValues) -> str:
    """Replace every ``${key}`` in ``template`` with ``values[key]``.

    Placeholders without a value are left as they are, so a template can be
    filled in several passes. Substituted text is never scanned again, which
    keeps values containing ``${...}`` literal.
    """
    if not values:
        return template
    # Longest first so a key that is a prefix of another cannot shadow it.
    tokens = sorted((placeholder(key) for key in values), key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: str(values[match.group(0)[2:-1]]), template)


__all__ = ["TemplateValues", "apply_template", "placeholder"]
