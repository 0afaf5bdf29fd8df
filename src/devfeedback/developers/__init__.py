"""Developer registry."""

from devfeedback.developers.registry import Developer, DeveloperRegistry

__all__ = ["Developer", "DeveloperRegistry"]
