"""
Text normalization shared by skill extraction and embedding.
"""

import re

_PUNCTUATION = re.compile(r'[^\w\s]')
_WHITESPACE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """
    Canonicalize raw document text.

    Lower-cases, replaces every character that is not a word character or
    whitespace with a space, collapses whitespace runs and trims.

    >>> normalize("  C++ Dev!!\\n\\tRemote ")
    'c dev remote'
    """
    if not text:
        return ""

    text = _PUNCTUATION.sub(' ', text.lower())
    return _WHITESPACE.sub(' ', text).strip()
