"""
Resume analysis orchestrator.

Runs the full matching pipeline:
1. Extract skills from the resume and the job description
2. Reconcile them into matched and missing skills
3. Embed both normalized documents and compute their cosine similarity
4. Score the four sections and the overall match
5. Generate recommendations

The pipeline is all-or-nothing: any failure surfaces as AnalysisFailed
and no partial result is returned.
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .config import DEFAULT_VOCABULARY_PATH, MATCH_BANDS, MatchConfig
from .embedding import EmbeddingClient, get_embedding_client
from .exceptions import AnalysisFailed
from .logging_config import AnalysisLogContext
from .normalizer import normalize
from .recommendations import recommend
from .scorer import calculate_overall_score, score_sections
from .similarity import cosine_similarity
from .skill_matcher import extract_skills, match_skills
from .vocabulary import Vocabulary, get_default_vocabulary, load_vocabulary

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], Any]


def match_band(score: int, bands: Optional[Mapping[str, int]] = None) -> str:
    """Classify an overall score as 'strong', 'moderate' or 'weak'."""
    bands = bands or MATCH_BANDS
    if score >= bands['strong']:
        return 'strong'
    if score >= bands['moderate']:
        return 'moderate'
    return 'weak'


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of matching one resume against one job description."""
    overall_score: int
    section_scores: Mapping[str, int]
    matched_skills: Tuple[str, ...]
    missing_skills: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    similarity: float

    @property
    def match_band(self) -> str:
        return match_band(self.overall_score)

    def to_dict(self) -> Dict:
        """Plain-dict form for JSON serialization."""
        return {
            'overall_score': self.overall_score,
            'match_band': self.match_band,
            'section_scores': dict(self.section_scores),
            'matched_skills': list(self.matched_skills),
            'missing_skills': list(self.missing_skills),
            'recommendations': list(self.recommendations),
            'similarity': round(self.similarity, 4),
        }


def _report_progress(on_progress: Optional[ProgressCallback], progress: int):
    """
    Fire-and-forget progress report; callback errors never affect the analysis.

    The callback must be synchronous. A coroutine returned by an async
    callback is closed without running.
    """
    if on_progress is None:
        return
    try:
        result = on_progress(progress)
    except Exception as e:
        logger.warning(f"Progress callback failed at {progress}%: {e}")
        return

    if inspect.iscoroutine(result):
        result.close()
        logger.warning(f"Progress callback returned a coroutine at {progress}%; callbacks must be synchronous")


class ResumeAnalyzer:
    """
    Matches resumes against job descriptions.

    The embedding client and vocabulary can be injected; otherwise the
    process-wide client and the configured vocabulary are loaded lazily.
    """

    def __init__(
        self,
        embedding_client: Optional[EmbeddingClient] = None,
        vocabulary: Optional[Vocabulary] = None,
        config: Optional[MatchConfig] = None
    ):
        self.config = config or MatchConfig()
        self._embedding_client = embedding_client
        self._vocabulary = vocabulary

    @property
    def embedding_client(self) -> EmbeddingClient:
        """Lazy load the embedding client."""
        if self._embedding_client is None:
            self._embedding_client = get_embedding_client(self.config.model_name)
        return self._embedding_client

    @property
    def vocabulary(self) -> Vocabulary:
        """Lazy load the skill vocabulary."""
        if self._vocabulary is None:
            if self.config.vocabulary_path == DEFAULT_VOCABULARY_PATH:
                self._vocabulary = get_default_vocabulary()
            else:
                self._vocabulary = load_vocabulary(self.config.vocabulary_path)
        return self._vocabulary

    async def analyze(
        self,
        resume_text: str,
        job_text: str,
        on_progress: Optional[ProgressCallback] = None
    ) -> AnalysisResult:
        """
        Analyze how well a resume matches a job description.

        Args:
            resume_text: Plain text of the resume
            job_text: Plain text of the job description
            on_progress: Optional synchronous callback receiving increasing progress (0-100)

        Returns:
            AnalysisResult

        Raises:
            AnalysisFailed: Wrapping the first error encountered
        """
        with AnalysisLogContext(logger, 'resume analysis'):
            try:
                return await self._run(resume_text, job_text, on_progress)
            except Exception as e:
                logger.error(f"Error during analysis: {e}", exc_info=True)
                raise AnalysisFailed(cause=e) from e

    async def _run(
        self,
        resume_text: str,
        job_text: str,
        on_progress: Optional[ProgressCallback]
    ) -> AnalysisResult:
        config = self.config
        _report_progress(on_progress, 10)

        # Step 1: Skills
        resume_skills = extract_skills(resume_text, self.vocabulary)
        job_skills = extract_skills(job_text, self.vocabulary)
        logger.info(f"Resume: {len(resume_skills)} skills, job: {len(job_skills)} skills")
        _report_progress(on_progress, 30)

        skill_match = match_skills(resume_skills, job_skills, config.max_missing_skills)
        _report_progress(on_progress, 50)

        # Step 2: Semantic similarity
        client = self.embedding_client
        resume_embedding, job_embedding = await asyncio.gather(
            client.embed(normalize(resume_text)),
            client.embed(normalize(job_text)),
        )
        _report_progress(on_progress, 70)

        similarity = cosine_similarity(resume_embedding, job_embedding)
        logger.info(f"Semantic similarity: {similarity:.3f}")
        _report_progress(on_progress, 80)

        # Step 3: Scores and recommendations
        sections = score_sections(job_skills, skill_match.matched, similarity, config)
        overall = calculate_overall_score(sections, config)

        recommendations = recommend(
            skill_match.all_missing,
            sections.skills,
            similarity,
            overall,
            config
        )
        _report_progress(on_progress, 90)

        result = AnalysisResult(
            overall_score=overall,
            section_scores=MappingProxyType(sections.rounded()),
            matched_skills=tuple(skill_match.matched),
            missing_skills=tuple(skill_match.missing),
            recommendations=tuple(recommendations),
            similarity=similarity,
        )
        _report_progress(on_progress, 100)
        return result


# Singleton instance
_analyzer_instance: Optional[ResumeAnalyzer] = None


def get_analyzer() -> ResumeAnalyzer:
    """Get or create the singleton analyzer, configured from the environment."""
    global _analyzer_instance
    if _analyzer_instance is None:
        _analyzer_instance = ResumeAnalyzer(config=MatchConfig.from_env())
    return _analyzer_instance


async def analyze(
    resume_text: str,
    job_text: str,
    on_progress: Optional[ProgressCallback] = None
) -> AnalysisResult:
    """Analyze a resume against a job description with the default analyzer."""
    return await get_analyzer().analyze(resume_text, job_text, on_progress)
