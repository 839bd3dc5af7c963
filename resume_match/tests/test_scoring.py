"""
Tests for cosine similarity, section scoring and recommendations.
"""
from unittest import TestCase

import numpy as np

from resume_match.config import MatchConfig
from resume_match.exceptions import DimensionMismatch
from resume_match.recommendations import (
    HIGHLIGHT_SKILLS,
    RESTRUCTURE,
    USE_KEYWORDS,
    recommend,
)
from resume_match.scorer import (
    SectionScores,
    calculate_overall_score,
    calculate_skills_score,
    round_score,
    score_sections,
)
from resume_match.similarity import cosine_similarity


# ==================== Cosine Similarity ====================

class CosineSimilarityTests(TestCase):

    def test_identical_vectors(self):
        v = [0.3, -1.2, 4.0, 0.5]
        self.assertAlmostEqual(cosine_similarity(v, v), 1.0, places=9)

    def test_opposite_vectors(self):
        v = np.array([0.3, -1.2, 4.0, 0.5])
        self.assertAlmostEqual(cosine_similarity(v, -v), -1.0, places=9)

    def test_orthogonal_vectors(self):
        self.assertAlmostEqual(cosine_similarity([1, 0], [0, 1]), 0.0, places=9)

    def test_zero_vector_returns_zero(self):
        self.assertEqual(cosine_similarity([0, 0, 0], [1, 2, 3]), 0.0)
        self.assertEqual(cosine_similarity([1, 2, 3], [0, 0, 0]), 0.0)
        self.assertEqual(cosine_similarity([0, 0], [0, 0]), 0.0)

    def test_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            cosine_similarity([1, 2], [1, 2, 3])

    def test_dimension_mismatch_is_value_error(self):
        with self.assertRaises(ValueError):
            cosine_similarity(np.ones(384), np.ones(768))

    def test_range(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            a, b = rng.normal(size=16), rng.normal(size=16)
            sim = cosine_similarity(a, b)
            self.assertGreaterEqual(sim, -1.0)
            self.assertLessEqual(sim, 1.0)

    def test_returns_python_float(self):
        self.assertIsInstance(cosine_similarity([1.0, 2.0], [2.0, 1.0]), float)


# ==================== Rounding ====================

class RoundScoreTests(TestCase):

    def test_half_rounds_up(self):
        self.assertEqual(round_score(2.5), 3)
        self.assertEqual(round_score(62.5), 63)
        self.assertEqual(round_score(0.5), 1)

    def test_regular_rounding(self):
        self.assertEqual(round_score(66.666), 67)
        self.assertEqual(round_score(66.4), 66)
        self.assertEqual(round_score(100.0), 100)


# ==================== Section Scores ====================

class SectionScoreTests(TestCase):

    def test_skills_score_partial(self):
        score = calculate_skills_score(["python", "react", "aws"], ["python", "react"])
        self.assertAlmostEqual(score, 66.67, places=2)

    def test_skills_score_no_job_skills(self):
        self.assertEqual(calculate_skills_score([], []), 100.0)
        self.assertEqual(calculate_skills_score([], ["python"]), 100.0)

    def test_skills_score_capped(self):
        # 'java' and 'javascript' both match the single job skill 'javascript'
        self.assertEqual(calculate_skills_score(["javascript"], ["java", "javascript"]), 100.0)

    def test_experience_boost_and_clamp(self):
        sections = score_sections(["python"], ["python"], 0.5)
        self.assertAlmostEqual(sections.experience, 60.0)
        sections = score_sections(["python"], ["python"], 0.9)
        self.assertEqual(sections.experience, 100.0)

    def test_education_tracks_similarity(self):
        sections = score_sections(["python"], [], 0.42)
        self.assertAlmostEqual(sections.education, 42.0)
        self.assertEqual(sections.skills, 0.0)

    def test_keywords_equal_skills(self):
        sections = score_sections(["python", "react", "aws"], ["python"], 0.7)
        self.assertEqual(sections.keywords, sections.skills)

    def test_negative_similarity_floored(self):
        sections = score_sections([], [], -0.4)
        self.assertEqual(sections.experience, 0.0)
        self.assertEqual(sections.education, 0.0)

    def test_bounds(self):
        job_skills = ["python", "react", "aws", "docker"]
        for similarity in (-1.0, -0.3, 0.0, 0.3, 0.83, 0.999, 1.0):
            for matched_count in range(len(job_skills) + 1):
                sections = score_sections(job_skills, job_skills[:matched_count], similarity)
                overall = calculate_overall_score(sections)
                for value in list(sections.rounded().values()) + [overall]:
                    self.assertGreaterEqual(value, 0)
                    self.assertLessEqual(value, 100)

    def test_rounded(self):
        sections = SectionScores(skills=66.667, experience=96.0, education=80.0, keywords=66.667)
        self.assertEqual(
            sections.rounded(),
            {"skills": 67, "experience": 96, "education": 80, "keywords": 67},
        )


# ==================== Overall Score ====================

class OverallScoreTests(TestCase):

    def test_weighted_sum(self):
        sections = SectionScores(skills=100.0, experience=50.0, education=50.0, keywords=100.0)
        # 40 + 15 + 10 + 10
        self.assertEqual(calculate_overall_score(sections), 75)

    def test_perfect(self):
        sections = SectionScores(skills=100.0, experience=100.0, education=100.0, keywords=100.0)
        self.assertEqual(calculate_overall_score(sections), 100)

    def test_uses_unrounded_sections(self):
        sections = SectionScores(skills=0.5, experience=0.0, education=0.0, keywords=0.5)
        # Rounded first this would be round(0.4 + 0.1) = 1
        self.assertEqual(calculate_overall_score(sections), 0)
        self.assertEqual(sections.rounded()["skills"], 1)

    def test_half_rounds_up(self):
        sections = SectionScores(skills=62.5, experience=62.5, education=62.5, keywords=62.5)
        self.assertEqual(calculate_overall_score(sections), 63)

    def test_custom_weights(self):
        config = MatchConfig(weights={"skills": 1.0, "experience": 0.0, "education": 0.0, "keywords": 0.0})
        sections = SectionScores(skills=30.0, experience=100.0, education=100.0, keywords=100.0)
        self.assertEqual(calculate_overall_score(sections, config), 30)

    def test_deterministic(self):
        sections = score_sections(["python", "aws"], ["python"], 0.71)
        self.assertEqual(calculate_overall_score(sections), calculate_overall_score(sections))


# ==================== Recommendations ====================

class RecommendTests(TestCase):

    def test_no_recommendations_when_all_thresholds_pass(self):
        self.assertEqual(recommend([], 100.0, 0.95, 98), [])

    def test_all_rules_fire_in_order(self):
        recs = recommend(["aws"], 20.0, 0.1, 15)
        self.assertEqual(recs, [
            "Add these missing skills to your resume: aws",
            HIGHLIGHT_SKILLS,
            USE_KEYWORDS,
            RESTRUCTURE,
        ])

    def test_missing_skills_capped_at_five(self):
        missing = ["aws", "docker", "kubernetes", "terraform", "linux", "bash", "git"]
        recs = recommend(missing, 100.0, 0.9, 90)
        self.assertEqual(recs, [
            "Add these missing skills to your resume: aws, docker, kubernetes, terraform, linux"
        ])

    def test_thresholds_are_strict(self):
        self.assertEqual(recommend([], 70.0, 0.6, 60), [])
        self.assertEqual(recommend([], 69.99, 0.6, 60), [HIGHLIGHT_SKILLS])
        self.assertEqual(recommend([], 70.0, 0.59, 60), [USE_KEYWORDS])
        self.assertEqual(recommend([], 70.0, 0.6, 59), [RESTRUCTURE])

    def test_custom_thresholds(self):
        config = MatchConfig(skills_threshold=90, max_recommended_skills=1)
        recs = recommend(["aws", "gcp"], 80.0, 0.9, 90, config)
        self.assertEqual(recs, ["Add these missing skills to your resume: aws", HIGHLIGHT_SKILLS])
