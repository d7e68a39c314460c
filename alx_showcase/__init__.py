"""ALX Showcase - detect and classify ALX curriculum projects among GitHub repositories."""

__version__ = "0.1.0"

from alx_showcase.core.classifier import classify

__all__ = ["classify"]
