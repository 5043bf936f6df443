"""
wikiai_backend

Top-level package for the WikiAI Backend relay service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "2.0.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal to avoid import-time side effects across the codebase.
