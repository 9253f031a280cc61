"""Interfaces for external collaborators."""

from zilkit.interfaces.provider import BaseProvider

__all__ = ["BaseProvider"]
