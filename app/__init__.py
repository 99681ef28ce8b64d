"""Life Dashboard - API de gestión personal."""

__version__ = "1.0.0"
