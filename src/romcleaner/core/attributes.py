"""Attribute extraction from normalized ROM filenames."""

from __future__ import annotations

import re

from romcleaner.shared.constants import TagPatterns

_WHITESPACE_RE = re.compile(TagPatterns.WHITESPACE)
_ATTRIBUTE_GROUP_RE = re.compile(TagPatterns.ATTRIBUTE_GROUP, re.ASCII)


def extract_attributes(normalized_filename: str) -> list[str]:
    """Parse every tag group of a filename into lowercase attribute tokens.

    Whitespace is removed before matching, so ``"( baz , 1 )"`` and
    ``"(baz,1)"`` give the same tokens. Groups containing anything other
    than word characters and commas (dots, dashes, nested parentheses)
    are ignored. Tokens keep their left-to-right, group-by-group order.

    Args:
        normalized_filename: Filename with brackets already normalized.

    Returns:
        List of attribute tokens, empty when no group matches.

    Example:
        >>> extract_attributes("FooBar (foo) (oof,baz 1).tst")
        ['foo', 'oof', 'baz1']
    """
    compact = _WHITESPACE_RE.sub("", normalized_filename.lower())

    attributes: list[str] = []
    for match in _ATTRIBUTE_GROUP_RE.finditer(compact):
        group = match.group(0)
        attributes.extend(group[1:-1].split(TagPatterns.ATTRIBUTE_SEPARATOR))
    return attributes


__all__ = ["extract_attributes"]
