"""Tag expression queries.

A query is a list of expressions. Tokens inside one expression are ANDed,
expressions are ORed::

    parse_platforms(["wifi gen3", "cellular"])   # (wifi AND gen3) OR cellular

A token is a tag, ``all``, or either of those prefixed with ``!``. ``!tag``
is the complement of ``tag`` over the whole registry and ``!all`` is empty.
"""
import re
from typing import Dict, Iterable, List, Sequence

from device_platforms.platforms import PLATFORMS, Platform, platforms_for_tag

ALL_TAG = 'all'
NEGATION_PREFIX = '!'

_WHITESPACE = re.compile(r'\s+')


def parse_one(token: str) -> Sequence[Platform]:
    negate = False
    if token.startswith(NEGATION_PREFIX):
        token = token[len(NEGATION_PREFIX):]
        negate = True

    if token == ALL_TAG:
        return () if negate else PLATFORMS
    if negate:
        return tuple(p for p in PLATFORMS if not p.has(token))
    return platforms_for_tag(token)


def _split_expression(expression: str) -> List[str]:
    # Leading or trailing whitespace leaves an empty token, which is an unknown tag
    return _WHITESPACE.split(expression)


def parse_expression(expression: str) -> List[Platform]:
    """Evaluate one expression, intersecting its tokens by platform id."""
    matched = None
    for token in _split_expression(expression):
        found = parse_one(token)
        if matched is None:
            matched = list(found)
        else:
            ids = {p.id for p in found}
            matched = [p for p in matched if p.id in ids]
    return matched


def parse_platforms(expressions: Iterable[str]) -> List[Platform]:
    """Union the platforms of each expression, in first-seen order."""
    platforms: Dict[int, Platform] = {}
    for expression in expressions:
        for p in parse_expression(expression):
            platforms.setdefault(p.id, p)
    return list(platforms.values())
