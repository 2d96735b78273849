"""Token grammar of the command line classifier.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import re
from collections.abc import Mapping
from typing import Final

# The option introducer. A token consisting only of DASHES is the break
# between options and params.
DASHES: Final = "--"

SHORT_NAME_PATTERN: Final = r"[A-Za-z0-9_]"
OPTION_NAME_PATTERN: Final = r"[A-Za-z0-9][A-Za-z0-9_-]*"

# ‘-f’ or ‘-f=VALUE’. The value tail may be empty and may contain newlines.
_SHORT_OPTION_RE: Final = re.compile(
    rf"-(?P<name>{SHORT_NAME_PATTERN})(?P<tail>=.*)?", re.DOTALL
)
# Token remainder after the DASHES: ‘NAME’, ‘NAME=’ or ‘NAME=VALUE’.
_LONG_OPTION_RE: Final = re.compile(
    rf"(?P<name>{OPTION_NAME_PATTERN})(?:=(?P<value>.*))?", re.DOTALL
)


def rewrite_short_option(token: str, short_option_map: Mapping[str, str]) -> str:
    """Rewrite a short option token like ‘-f=1’ to its long form like ‘--file=1’.

    A short name missing from the map is used as the long name as is, so ‘-x’
    becomes ‘--x’. Tokens that do not have the short option shape are returned
    unchanged.
    """
    match = _SHORT_OPTION_RE.fullmatch(token)
    if not match:
        return token
    name = match["name"]
    return DASHES + short_option_map.get(name, name) + (match["tail"] or "")


def match_long_option(option: str) -> tuple[str, str | None] | None:
    """Match the part of a token that follows the DASHES.

    Returns:
        tuple[str, str | None] | None: (name, value) where value is None if
        there was no ‘=’ sign, or None if ‘option’ is malformed.
    """
    match = _LONG_OPTION_RE.fullmatch(option)
    if not match:
        return None
    return match["name"], match["value"]
