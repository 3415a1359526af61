from __future__ import annotations

from collections.abc import Mapping

ROOT_PREFIX = "."


def expand(text: str, table: Mapping[str, str]) -> str:
    """Turn user input into a jq filter expression.

    A shorthand name wins over literal interpretation, even when the name is
    itself a valid filter. Anything else is anchored at the root selector.
    """
    if text in table:
        return table[text]
    if text.startswith(ROOT_PREFIX):
        return text
    return ROOT_PREFIX + text
