"""
wikiai_backend.llm.prompts

Fixed prompt template for encyclopedia-style articles.
"""

from __future__ import annotations

SYSTEM_PROMPT = (
    "You are an expert encyclopedia writer. Create well-structured, informative articles "
    "similar to Wikipedia entries. Use clear formatting with proper headings and "
    "comprehensive content."
)

ARTICLE_PROMPT_TEMPLATE = """Write a comprehensive, well-structured Wikipedia-style article about "{topic}".

Structure the article with:
1. Start with a clear introductory paragraph defining/explaining the topic
2. Use proper section headers (use ## for main sections, ### for subsections)
3. Include relevant historical background, key concepts, and important details
4. Write in an encyclopedic, neutral tone
5. Make it factually accurate and informative
6. Use bullet points for lists where appropriate
7. Include interesting facts and current relevance

Format the content clearly with proper headings and paragraphs. Avoid using asterisks (*) for emphasis - instead write naturally with clear, informative content."""


def build_article_prompt(topic: str) -> str:
    # str.replace rather than str.format: topics may contain braces.
    return ARTICLE_PROMPT_TEMPLATE.replace("{topic}", topic)


def build_messages(topic: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_article_prompt(topic)},
    ]
