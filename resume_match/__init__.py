"""
Resume matching engine.

This package provides:
- Vocabulary-based skill extraction and matching
- Semantic similarity using sentence-transformers embeddings
- Weighted section scoring and recommendations

Usage:
    import asyncio
    from resume_match import analyze

    result = asyncio.run(analyze(resume_text, job_text))
    print(f"Match: {result.overall_score}%")
"""

from .analyzer import AnalysisResult, ResumeAnalyzer, analyze, get_analyzer
from .config import MatchConfig
from .embedding import (
    BackendState,
    EmbeddingClient,
    EmbeddingProvider,
    SentenceTransformerProvider,
    get_embedding_client,
)
from .exceptions import (
    AnalysisFailed,
    DimensionMismatch,
    DocumentExtractionError,
    EmbeddingComputeError,
    EmbeddingUnavailable,
    ResumeMatchError,
    UnsupportedFileType,
)
from .extractors import extract_text
from .normalizer import normalize
from .recommendations import recommend
from .scorer import SectionScores, calculate_overall_score, score_sections
from .similarity import cosine_similarity
from .skill_matcher import SkillMatch, extract_skills, match_skills
from .vocabulary import load_vocabulary

__all__ = [
    'AnalysisResult', 'ResumeAnalyzer', 'analyze', 'get_analyzer',
    'MatchConfig',
    'BackendState', 'EmbeddingClient', 'EmbeddingProvider',
    'SentenceTransformerProvider', 'get_embedding_client',
    'AnalysisFailed', 'DimensionMismatch', 'DocumentExtractionError',
    'EmbeddingComputeError', 'EmbeddingUnavailable', 'ResumeMatchError',
    'UnsupportedFileType',
    'extract_text', 'normalize', 'recommend',
    'SectionScores', 'calculate_overall_score', 'score_sections',
    'cosine_similarity',
    'SkillMatch', 'extract_skills', 'match_skills',
    'load_vocabulary',
]
__version__ = "0.1.0"
