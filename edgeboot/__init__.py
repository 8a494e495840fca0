"""Service bootstrap helpers: a dependency-injection container and configuration records."""

__version__ = "0.1.0"
__all__ = ["config", "di"]