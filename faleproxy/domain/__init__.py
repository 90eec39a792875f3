"""Domain objects for faleproxy - explicit re-exports to satisfy linters."""
from .http_response import HttpResponse as HttpResponse
from .rewrite_result import RewriteResult as RewriteResult
from .rewrite_result import RewrittenDocument as RewrittenDocument

__all__ = ["HttpResponse", "RewriteResult", "RewrittenDocument"]
