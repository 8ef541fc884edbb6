"""Placeholder key substitution.

Custom templates reference the component name through four literal tokens,
one per casing.  :func:`replace_keys` swaps every occurrence of each token
for the matching casing of the supplied name, in both file contents and
template-relative paths.
"""

from __future__ import annotations

import re

from component_scaffold.errors import InvalidArgumentError


# ---------------------------------------------------------------------------
# Placeholder tokens (checked in this order)
# ---------------------------------------------------------------------------

EXACT_KEY = "COMPONENT_NAME"
LOWER_KEY = "component_name"
UPPER_KEY = "COMPONENT_CAP_NAME"
CAMEL_KEY = "cOMPONENT_NAME"

PLACEHOLDER_KEYS: tuple[str, ...] = (EXACT_KEY, LOWER_KEY, UPPER_KEY, CAMEL_KEY)

_IDENTIFIER_CHARS = r"A-Za-z0-9_"


def validate_name(name: str) -> str:
    """Return *name* unchanged, or raise if it cannot be substituted."""
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(f"Component name must be a non-empty string, got {name!r}")
    return name


def placeholder_values(name: str) -> dict[str, str]:
    """Return the ``{token: replacement}`` mapping for *name*."""
    validate_name(name)
    return {
        EXACT_KEY: name,
        LOWER_KEY: name.lower(),
        UPPER_KEY: name.upper(),
        CAMEL_KEY: name[0].lower() + name[1:],
    }


def replace_keys(text: str, name: str, *, word_boundary: bool = False) -> str:
    """Substitute every placeholder token in *text* with a casing of *name*.

    Tokens are applied one after the other on the progressively updated
    string.  Matching is literal and case-sensitive: by default a token
    embedded in a longer identifier (``MYCOMPONENT_NAME_X``) is replaced as
    well.  Pass ``word_boundary=True`` to only replace tokens that are not
    adjacent to identifier characters.

    Raises:
        InvalidArgumentError: If *name* is empty.
    """
    values = placeholder_values(name)
    result = text
    for key in PLACEHOLDER_KEYS:
        if key not in result:
            continue
        if word_boundary:
            pattern = rf"(?<![{_IDENTIFIER_CHARS}]){re.escape(key)}(?![{_IDENTIFIER_CHARS}])"
            result = re.sub(pattern, lambda _match: values[key], result)
        else:
            result = result.replace(key, values[key])
    return result
