"""Name casing helpers shared by the GraphQL naming conventions."""

import re
from typing import Sequence, Union

_WORD_SPLIT = re.compile(r"[^a-zA-Z0-9]+")


def camelcase(value: Union[str, Sequence[str]]) -> str:
    """Convert a machine name into an upper camel case GraphQL name.

    Sequences are joined with underscores first, so
    ``camelcase(["articles", "graphql_1"])`` gives ``ArticlesGraphql1``.
    Only the first letter of each word is touched.
    """
    if not isinstance(value, str):
        value = "_".join(value)
    words = [w for w in _WORD_SPLIT.split(value) if w]
    return "".join(w[:1].upper() + w[1:] for w in words)
