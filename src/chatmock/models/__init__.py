"""Data models - Pydantic schemas for the canonical chat shapes."""

from chatmock.models.schemas import (
    Choice,
    CompletionRequest,
    CompletionResponse,
    Message,
    Usage,
)

__all__ = [
    "Choice",
    "CompletionRequest",
    "CompletionResponse",
    "Message",
    "Usage",
]
