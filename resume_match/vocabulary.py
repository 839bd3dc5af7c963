"""
Skill vocabulary loading.

The vocabulary is a newline-delimited text file of lowercase skill
phrases. Blank lines and lines starting with '#' are ignored.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from .config import DEFAULT_VOCABULARY_PATH

logger = logging.getLogger(__name__)

Vocabulary = Tuple[str, ...]


def build_vocabulary(entries: Iterable[str]) -> Vocabulary:
    """
    Build a vocabulary from raw entries.

    Entries are stripped and lower-cased; case-insensitive duplicates are
    dropped, keeping the first occurrence so the order is stable.

    Args:
        entries: Skill phrases in priority order

    Returns:
        Tuple of unique lowercase skill phrases
    """
    seen = set()
    vocabulary = []

    for entry in entries:
        skill = entry.strip().lower()
        if not skill or skill.startswith('#'):
            continue
        if skill in seen:
            logger.debug(f"Skipping duplicate vocabulary entry: {skill}")
            continue
        seen.add(skill)
        vocabulary.append(skill)

    return tuple(vocabulary)


def load_vocabulary(path: Optional[Union[str, Path]] = None) -> Vocabulary:
    """
    Load a skill vocabulary from a text file.

    Args:
        path: Vocabulary file (defaults to the bundled skills.txt)

    Returns:
        Tuple of unique lowercase skill phrases
    """
    path = Path(path) if path else DEFAULT_VOCABULARY_PATH

    with open(path, encoding='utf-8') as f:
        vocabulary = build_vocabulary(f)

    logger.info(f"Loaded {len(vocabulary)} skills from {path}")
    return vocabulary


# Process-wide default, loaded on first use
_default_vocabulary: Optional[Vocabulary] = None


def get_default_vocabulary() -> Vocabulary:
    """Get or load the bundled skill vocabulary."""
    global _default_vocabulary
    if _default_vocabulary is None:
        _default_vocabulary = load_vocabulary()
    return _default_vocabulary
