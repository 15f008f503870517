"""lcrview: terminal dashboard for a local container registry."""

__version__ = "0.1.0"
