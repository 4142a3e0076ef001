"""HTTP transport for didox-sdk."""

from .client import HttpClient, HttpResponse

__all__ = [
    "HttpClient",
    "HttpResponse",
]
