"""
Text embedding client.

Wraps an embedding provider (sentence-transformers by default) behind an
async client with an explicit lifecycle:

    UNINITIALIZED -> LOADING -> READY

A failed load returns the client to UNINITIALIZED so a later call can
retry. Only one load runs at a time; callers arriving while the model is
loading await the same in-flight load.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, Sequence

import numpy as np

from .config import DEFAULT_MODEL
from .exceptions import EmbeddingComputeError, EmbeddingUnavailable

logger = logging.getLogger(__name__)


class BackendState(Enum):
    """Lifecycle of the embedding backend."""
    UNINITIALIZED = 'uninitialized'
    LOADING = 'loading'
    READY = 'ready'


class EmbeddingProvider(ABC):
    """
    Source of text embeddings.

    Implementations must be deterministic for equal input and return
    vectors of the same length on every call.
    """

    @abstractmethod
    def load(self) -> Any:
        """Load the model and return a handle for infer(). May be slow."""

    @abstractmethod
    def infer(self, handle: Any, text: str) -> Sequence[float]:
        """Embed text with mean pooling and L2 normalization."""


class SentenceTransformerProvider(EmbeddingProvider):
    """Embedding provider backed by a HuggingFace sentence-transformers model."""

    def __init__(self, model_name: Optional[str] = None):
        """
        Args:
            model_name: HuggingFace model name for embeddings
        """
        self.model_name = model_name or DEFAULT_MODEL

    def load(self):
        from sentence_transformers import SentenceTransformer, models

        logger.info(f"Loading embedding model: {self.model_name}")
        transformer = models.Transformer(self.model_name)
        pooling = models.Pooling(
            transformer.get_word_embedding_dimension(),
            pooling_mode='mean'
        )
        model = SentenceTransformer(modules=[transformer, pooling])
        logger.info("Model loaded successfully")
        return model

    def infer(self, handle, text: str) -> np.ndarray:
        return handle.encode(text, convert_to_numpy=True, normalize_embeddings=True)


class EmbeddingClient:
    """
    Async embedding client with lazy, single-flight model loading.

    The provider's load() and infer() are blocking calls; both run in a
    worker thread so the event loop stays responsive.
    """

    def __init__(self, provider: Optional[EmbeddingProvider] = None):
        self.provider = provider or SentenceTransformerProvider()
        self._state = BackendState.UNINITIALIZED
        self._handle = None
        self._loading: Optional[asyncio.Future] = None
        self._load_error: Optional[BaseException] = None

    @property
    def state(self) -> BackendState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is BackendState.READY

    async def initialize(self) -> bool:
        """
        Load the backend if needed.

        Load failures are logged, not raised.

        Returns:
            True if the backend is ready
        """
        if self._state is BackendState.READY:
            return True

        if not self._load_in_flight():
            self._state = BackendState.LOADING
            self._loading = asyncio.ensure_future(self._load())

        # Shield so a cancelled waiter does not cancel the shared load
        return await asyncio.shield(self._loading)

    def _load_in_flight(self) -> bool:
        """True if a load is running on the current event loop."""
        if self._loading is None:
            return False
        if self._loading.done() or self._loading.get_loop() is not asyncio.get_running_loop():
            # Leftover from a cancelled load or a loop that has since closed
            self._loading = None
            self._state = BackendState.UNINITIALIZED
            return False
        return True

    async def _load(self) -> bool:
        try:
            self._handle = await asyncio.to_thread(self.provider.load)
            self._state = BackendState.READY
            self._load_error = None
            return True
        except Exception as e:
            logger.error(f"Failed to load embedding model: {e}", exc_info=True)
            self._load_error = e
            return False
        finally:
            # Also runs on cancellation, so a later call can retry
            if self._loading is asyncio.current_task():
                self._loading = None
                if self._state is not BackendState.READY:
                    self._state = BackendState.UNINITIALIZED

    async def embed(self, text: str) -> np.ndarray:
        """
        Embed already-normalized text.

        Args:
            text: Text to embed

        Returns:
            1-D embedding vector

        Raises:
            EmbeddingUnavailable: If the model could not be loaded
            EmbeddingComputeError: If inference fails for this input
        """
        if not await self.initialize():
            raise EmbeddingUnavailable("Text embedding model not available") from self._load_error

        try:
            vector = await asyncio.to_thread(self.provider.infer, self._handle, text)
            return np.asarray(vector, dtype=float).ravel()
        except Exception as e:
            logger.error(f"Error generating embeddings: {e}")
            raise EmbeddingComputeError("Failed to generate text embeddings") from e


# Singleton instance for convenience
_client_instance: Optional[EmbeddingClient] = None


def get_embedding_client(model_name: Optional[str] = None) -> EmbeddingClient:
    """
    Get or create the process-wide embedding client.

    Args:
        model_name: Model to use when the client is first created
    """
    global _client_instance
    if _client_instance is None:
        _client_instance = EmbeddingClient(SentenceTransformerProvider(model_name))
    return _client_instance


def reset_embedding_client():
    """Drop the process-wide client so the next call creates a fresh one."""
    global _client_instance
    _client_instance = None
