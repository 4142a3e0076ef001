"""
Infrastructure layer for didox-sdk.

This layer contains:
- Config: Validated SDK configuration (explicit or from environment)
- Factories: Builder lookup by name or document type code

Following clean architecture:
- Depends on domain layer (entities, interfaces)
- Handles external dependencies (environment, .env files)
"""

from .config import DidoxConfig
from .factories import BuilderFactory

__all__ = [
    # Config
    "DidoxConfig",
    # Factories
    "BuilderFactory",
]
