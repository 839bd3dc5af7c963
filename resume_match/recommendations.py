"""
Human-readable recommendations derived from an analysis.
"""

import logging
from typing import List, Optional, Sequence

from .config import MatchConfig

logger = logging.getLogger(__name__)

ADD_MISSING_SKILLS = "Add these missing skills to your resume: {skills}"
HIGHLIGHT_SKILLS = (
    "Consider highlighting more relevant technical skills that match the job requirements."
)
USE_KEYWORDS = "Try to use more keywords and phrases from the job description in your resume."
RESTRUCTURE = "Consider restructuring your resume to better align with the job requirements."


def recommend(
    missing_skills: Sequence[str],
    skills_score: float,
    similarity: float,
    overall_score: float,
    config: Optional[MatchConfig] = None
) -> List[str]:
    """
    Generate recommendations for improving a resume.

    Rules are evaluated in a fixed order and each adds at most one
    message; none suppresses another.

    Args:
        missing_skills: Job skills absent from the resume
        skills_score: Unrounded skills section score
        similarity: Cosine similarity of the two documents
        overall_score: Overall match score
        config: Thresholds and caps

    Returns:
        Ordered list of recommendation strings
    """
    config = config or MatchConfig()
    recommendations = []

    if missing_skills:
        skills = ", ".join(missing_skills[:config.max_recommended_skills])
        recommendations.append(ADD_MISSING_SKILLS.format(skills=skills))

    if skills_score < config.skills_threshold:
        recommendations.append(HIGHLIGHT_SKILLS)

    if similarity < config.similarity_threshold:
        recommendations.append(USE_KEYWORDS)

    if overall_score < config.overall_threshold:
        recommendations.append(RESTRUCTURE)

    logger.debug(f"Generated {len(recommendations)} recommendations")
    return recommendations
