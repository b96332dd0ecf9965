"""Application package initialization."""

__all__ = []
