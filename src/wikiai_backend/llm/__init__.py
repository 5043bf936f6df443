"""
wikiai_backend.llm

Outbound LLM boundary.

Responsibilities:
- Prompt template for encyclopedia articles.
- OpenRouter chat-completions client and its error types.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The service layer should depend on this boundary (not on httpx or routers directly).
