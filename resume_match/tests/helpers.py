"""
Shared test fixtures and helpers for the resume_match test suite.
"""
import hashlib
import time

from resume_match.embedding import EmbeddingClient, EmbeddingProvider
from resume_match.normalizer import normalize
from resume_match.vocabulary import build_vocabulary


SAMPLE_RESUME = "Experienced Python and React developer"
SAMPLE_JOB = "Looking for Python, React, and AWS experience"


def hash_embedding(text, dim=64):
    """Deterministic bag-of-words embedding: each token adds 1 to a hashed bucket."""
    vector = [0.0] * dim
    for token in text.split():
        digest = hashlib.md5(token.encode("utf-8")).hexdigest()
        vector[int(digest[:8], 16) % dim] += 1.0
    norm = sum(v * v for v in vector) ** 0.5
    return [v / norm for v in vector] if norm else vector


class HashingProvider(EmbeddingProvider):
    """Embedding provider test double with controllable load behaviour."""

    def __init__(self, dim=64, load_delay=0.0, fail_load=False, fail_infer=False):
        self.dim = dim
        self.load_delay = load_delay
        self.fail_load = fail_load
        self.fail_infer = fail_infer
        self.load_calls = 0
        self.infer_calls = 0

    def load(self):
        self.load_calls += 1
        if self.load_delay:
            time.sleep(self.load_delay)
        if self.fail_load:
            raise OSError("model download failed")
        return {"dim": self.dim}

    def infer(self, handle, text):
        self.infer_calls += 1
        if self.fail_infer:
            raise RuntimeError("backend failure")
        return hash_embedding(text, handle["dim"])


class MappingProvider(EmbeddingProvider):
    """Embedding provider returning fixed vectors keyed by normalized text."""

    def __init__(self, vectors):
        self.vectors = {normalize(text): vector for text, vector in vectors.items()}

    def load(self):
        return self.vectors

    def infer(self, handle, text):
        return handle[text]


def create_test_client(**kwargs):
    """Return an EmbeddingClient backed by a HashingProvider."""
    return EmbeddingClient(HashingProvider(**kwargs))


def create_test_vocabulary(count=15):
    """Return a reduced vocabulary of non-overlapping skills: skill01, skill02, ..."""
    return build_vocabulary(f"skill{i:02d}" for i in range(1, count + 1))
