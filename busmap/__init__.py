"""Interactive bus network map with quickest-route search and saved routes."""

__version__ = "0.1.0"
__all__ = ["__version__"]