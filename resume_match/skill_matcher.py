"""
Vocabulary-based skill extraction and matching.

Skills are found by substring containment of each vocabulary entry in
the normalized document text, then reconciled between a resume and a
job description into matched and missing lists.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import MAX_MISSING_SKILLS
from .normalizer import normalize
from .vocabulary import Vocabulary, get_default_vocabulary

logger = logging.getLogger(__name__)

# Shorter entries (e.g. 'r', or 'c++' once normalized) match almost any text
MIN_SKILL_LENGTH = 2


@dataclass(frozen=True)
class SkillMatch:
    """Result of reconciling resume skills against job skills."""
    matched: List[str]
    missing: List[str]
    all_missing: List[str] = field(default_factory=list)


def extract_skills(text: str, vocabulary: Optional[Vocabulary] = None) -> List[str]:
    """
    Extract vocabulary skills present in a document.

    Args:
        text: Raw document text
        vocabulary: Skill vocabulary (defaults to the bundled one)

    Returns:
        Matching vocabulary entries, deduplicated, in vocabulary order
    """
    if vocabulary is None:
        vocabulary = get_default_vocabulary()

    normalized_text = normalize(text)
    found = []

    for skill in vocabulary:
        needle = normalize(skill)
        if len(needle) < MIN_SKILL_LENGTH:
            continue
        if needle in normalized_text and skill not in found:
            found.append(skill)

    logger.debug(f"Extracted {len(found)} skills: {found}")
    return found


def match_skills(
    resume_skills: Sequence[str],
    job_skills: Sequence[str],
    max_missing: int = MAX_MISSING_SKILLS
) -> SkillMatch:
    """
    Reconcile resume skills against job skills.

    A resume skill is matched when some job skill contains it; a job
    skill is missing when no resume skill contains it. Both tests are
    case-insensitive substring checks.

    Args:
        resume_skills: Skills extracted from the resume
        job_skills: Skills extracted from the job description
        max_missing: Cap on the missing skills presented to callers

    Returns:
        SkillMatch with matched skills and the capped missing list
    """
    resume_lower = [s.lower() for s in resume_skills]
    job_lower = [s.lower() for s in job_skills]

    matched = [
        skill for skill, skill_lower in zip(resume_skills, resume_lower)
        if any(skill_lower in job_skill for job_skill in job_lower)
    ]
    missing = [
        skill for skill, skill_lower in zip(job_skills, job_lower)
        if not any(skill_lower in resume_skill for resume_skill in resume_lower)
    ]

    logger.debug(f"Skill match: {len(matched)} matched, {len(missing)} missing")
    return SkillMatch(
        matched=matched,
        missing=missing[:max_missing],
        all_missing=missing,
    )
