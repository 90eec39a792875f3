"""Rewrite result data models."""
from typing import NamedTuple, Optional


class RewrittenDocument(NamedTuple):
    """HTML after term substitution."""
    content: str
    title: Optional[str] = None
    replacements: int = 0
    """Number of term occurrences replaced across text nodes and attributes"""


class RewriteResult(NamedTuple):
    """Outcome of fetching a page and rewriting it.

    Serialized by the API as ``{success, content, title, originalUrl}``.
    """
    success: bool
    content: str
    original_url: str
    title: Optional[str] = None

    def to_payload(self) -> dict:
        return {
            "success": self.success,
            "content": self.content,
            "title": self.title,
            "originalUrl": self.original_url,
        }
