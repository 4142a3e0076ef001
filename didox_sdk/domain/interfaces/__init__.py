"""Domain interfaces (Protocols) for didox-sdk."""

from .builder import DocumentBuilder
from .submitter import DocumentSubmitter

__all__ = [
    "DocumentBuilder",
    "DocumentSubmitter",
]
