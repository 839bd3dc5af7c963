"""
Section and overall scoring.

All scoring functions are deterministic - same inputs produce same outputs.

Formula:
    skills     = 100 * matched / job_skills   (100 when the job lists none)
    experience = min(100, 120 * similarity)
    education  = 100 * similarity
    keywords   = skills
    overall    = round(0.4 * skills + 0.3 * experience
                       + 0.2 * education + 0.1 * keywords)

The overall score is computed from the unrounded sections and rounded
once; the sections are rounded separately for display.
"""

import math
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .config import MatchConfig

logger = logging.getLogger(__name__)


def round_score(value: float) -> int:
    """Round half away from zero (2.5 -> 3), unlike Python's round()."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class SectionScores:
    """Unrounded section scores (0-100)."""
    skills: float
    experience: float
    education: float
    keywords: float

    def rounded(self) -> Dict[str, int]:
        """Section scores rounded for display."""
        return {
            'skills': round_score(self.skills),
            'experience': round_score(self.experience),
            'education': round_score(self.education),
            'keywords': round_score(self.keywords),
        }


def calculate_skills_score(job_skills: Sequence[str], matched: Sequence[str]) -> float:
    """
    Calculate the skills score (0-100).

    A job description without any recognised skill is a vacuous
    match and scores 100.
    """
    if not job_skills:
        logger.debug("No job skills found, skills score = 100")
        return 100.0

    # matched may exceed job skills when several resume skills hit one job skill
    return min(100.0, len(matched) / len(job_skills) * 100)


def score_sections(
    job_skills: Sequence[str],
    matched: Sequence[str],
    similarity: float,
    config: Optional[MatchConfig] = None
) -> SectionScores:
    """
    Calculate the four section scores.

    Args:
        job_skills: Skills extracted from the job description
        matched: Resume skills matched against the job skills
        similarity: Cosine similarity of the two document embeddings
        config: Scoring configuration

    Returns:
        Unrounded SectionScores
    """
    config = config or MatchConfig()

    skills_score = calculate_skills_score(job_skills, matched)

    # Custom providers may return unnormalized vectors with negative similarity
    semantic = min(1.0, max(0.0, similarity))
    experience_score = min(100.0, semantic * (config.experience_boost * 100))
    education_score = semantic * 100
    keywords_score = skills_score

    logger.debug(
        f"Section scores: skills={skills_score:.2f}, experience={experience_score:.2f}, "
        f"education={education_score:.2f}, keywords={keywords_score:.2f}"
    )

    return SectionScores(
        skills=skills_score,
        experience=experience_score,
        education=education_score,
        keywords=keywords_score,
    )


def calculate_overall_score(sections: SectionScores, config: Optional[MatchConfig] = None) -> int:
    """
    Combine unrounded section scores into the overall score (0-100).

    Args:
        sections: Unrounded section scores
        config: Scoring configuration providing the weights

    Returns:
        Weighted score rounded once
    """
    weights = (config or MatchConfig()).weights

    weighted = (
        weights['skills'] * sections.skills +
        weights['experience'] * sections.experience +
        weights['education'] * sections.education +
        weights['keywords'] * sections.keywords
    )

    overall = round_score(weighted)
    logger.info(f"Overall score: {overall} (weighted {weighted:.2f})")
    return overall
