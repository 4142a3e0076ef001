"""Factories for creating infrastructure objects."""

from .builder_factory import BuilderFactory

__all__ = [
    "BuilderFactory",
]
