"""
Text and number extraction from YouTube "rich text" nodes.

YouTube renders display text either as ``{"simpleText": "..."}`` or as a
sequence of fragments ``{"runs": [{"text": "..."}, ...]}``.
"""

from __future__ import annotations

import re
from typing import Any

_NON_DIGITS_RE = re.compile(r"\D+")


def extract_text(node: dict[str, Any] | None) -> str:
    """
    Return the plain text of a rich-text node.

    Parameters
    ----------
    node : dict[str, Any] | None
        A ``simpleText`` or ``runs`` node.

    Returns
    -------
    str
        ``simpleText`` when present, otherwise the concatenated text of all
        runs in order. Empty string for empty or missing nodes.

    Examples
    --------
    >>> extract_text({"simpleText": "Foo"})
    'Foo'
    >>> extract_text({"runs": [{"text": "A"}, {"text": "B"}]})
    'AB'
    """
    if not node:
        return ""
    simple = node.get("simpleText")
    if simple:
        return str(simple)
    return "".join(str(run.get("text", "")) for run in node.get("runs") or [])


def extract_number(node: dict[str, Any] | None) -> int | None:
    """
    Parse the digits of a rich-text node as an integer.

    All non-digit characters are dropped, so ``"1,234 views"`` yields
    ``1234``. Returns None when no digits remain; callers decide whether
    that means zero.
    """
    digits = _NON_DIGITS_RE.sub("", extract_text(node))
    if not digits:
        return None
    return int(digits)
