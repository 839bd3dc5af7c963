"""
Configuration for the resume matching engine.

Adjust weights, thresholds and the embedding model here, or override
the most common settings through environment variables.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

# Bundled skill vocabulary
DEFAULT_VOCABULARY_PATH = Path(__file__).parent / 'data' / 'skills.txt'

# Small and fast; 384-dimensional output
DEFAULT_MODEL = 'sentence-transformers/all-MiniLM-L6-v2'

# Section weights (must sum to 1.0)
SECTION_WEIGHTS = {
    'skills': 0.40,
    'experience': 0.30,
    'education': 0.20,
    'keywords': 0.10,
}

# Similarity multiplier for the experience section
EXPERIENCE_BOOST = 1.2

# Recommendation thresholds
THRESHOLDS = {
    'skills_score': 70,
    'similarity': 0.6,
    'overall_score': 60,
}

# User-visible truncation
MAX_RECOMMENDED_SKILLS = 5
MAX_MISSING_SKILLS = 10

# Match bands for the overall score
MATCH_BANDS = {
    'strong': 80,
    'moderate': 60,
}

# Environment variables
ENV_MODEL = 'RESUME_MATCH_MODEL'
ENV_VOCABULARY = 'RESUME_MATCH_VOCABULARY'
ENV_LOG_LEVEL = 'RESUME_MATCH_LOG_LEVEL'


@dataclass
class MatchConfig:
    """Configuration for a resume analyzer."""
    model_name: str = DEFAULT_MODEL
    vocabulary_path: Path = DEFAULT_VOCABULARY_PATH
    weights: Dict[str, float] = field(default_factory=lambda: dict(SECTION_WEIGHTS))
    experience_boost: float = EXPERIENCE_BOOST
    skills_threshold: float = THRESHOLDS['skills_score']
    similarity_threshold: float = THRESHOLDS['similarity']
    overall_threshold: float = THRESHOLDS['overall_score']
    max_recommended_skills: int = MAX_RECOMMENDED_SKILLS
    max_missing_skills: int = MAX_MISSING_SKILLS
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> 'MatchConfig':
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            MatchConfig with overrides applied
        """
        environ = os.environ if environ is None else environ
        config = cls()

        if environ.get(ENV_MODEL):
            config.model_name = environ[ENV_MODEL]

        if environ.get(ENV_VOCABULARY):
            config.vocabulary_path = Path(environ[ENV_VOCABULARY])

        level_name = environ.get(ENV_LOG_LEVEL)
        if level_name:
            level = logging.getLevelName(level_name.upper())
            if isinstance(level, int):
                config.log_level = level

        return config
