"""API Gateway authentication configuration."""

__version__ = "1.0.0"
