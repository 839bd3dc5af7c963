"""
Cosine similarity between embedding vectors.
"""

import logging
from typing import Sequence, Union

import numpy as np

from .exceptions import DimensionMismatch

logger = logging.getLogger(__name__)

VectorLike = Union[np.ndarray, Sequence[float]]


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """
    Compute cosine similarity between two vectors.

    Args:
        a: First vector
        b: Second vector of the same length

    Returns:
        Similarity in [-1, 1]; 0.0 when either vector has zero norm

    Raises:
        DimensionMismatch: If the vectors differ in length
    """
    vec_a = np.asarray(a, dtype=float).ravel()
    vec_b = np.asarray(b, dtype=float).ravel()

    if vec_a.shape[0] != vec_b.shape[0]:
        logger.error(f"Cannot compare vectors of length {vec_a.shape[0]} and {vec_b.shape[0]}")
        raise DimensionMismatch(vec_a.shape[0], vec_b.shape[0])

    # Degenerate input, not a numerical error
    if not np.any(vec_a) or not np.any(vec_b):
        return 0.0

    from sklearn.metrics.pairwise import cosine_similarity as pairwise_cosine
    similarity = pairwise_cosine(
        vec_a.reshape(1, -1),
        vec_b.reshape(1, -1)
    )[0][0]

    return float(np.clip(similarity, -1.0, 1.0))
