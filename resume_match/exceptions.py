"""
Error types raised by the resume matching engine.
"""

from typing import Optional


class ResumeMatchError(Exception):
    """Base class for every error raised by resume_match."""


class UnsupportedFileType(ResumeMatchError, ValueError):
    """Raised when a document's MIME type has no text extractor."""

    def __init__(self, mime_type: str):
        self.mime_type = mime_type
        super().__init__(
            f"Unsupported file type: {mime_type!r}. Please upload a PDF, DOCX or plain text file."
        )


class DocumentExtractionError(ResumeMatchError):
    """Raised when a supported document cannot be read."""


class EmbeddingUnavailable(ResumeMatchError):
    """Raised when the embedding model could not be loaded."""


class EmbeddingComputeError(ResumeMatchError):
    """Raised when the loaded embedding model fails on a given input."""


class DimensionMismatch(ResumeMatchError, ValueError):
    """Raised when two vectors of different length are compared."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"Vectors must have the same length (got {left} and {right})")


class AnalysisFailed(ResumeMatchError):
    """
    Top-level failure of an analysis run.

    The underlying error is kept both as ``cause`` and as the chained
    ``__cause__`` so callers can log the full traceback.
    """

    def __init__(self, message: str = "Analysis failed. Please try again.",
                 cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
