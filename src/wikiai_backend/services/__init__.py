"""
wikiai_backend.services

Service-layer package.

Responsibilities:
- Turn a topic into an article by delegating to the LLM boundary.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake clients.
