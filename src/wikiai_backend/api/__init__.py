"""
wikiai_backend.api

API package for the WikiAI Backend service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, error translation and request/response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request validation + delegation to services.
