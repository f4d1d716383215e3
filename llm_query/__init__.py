"""
llm_query — integracja z modelem językowym (Gemini) dla adnotacji akapitów.

Publiczne API:
  generate(prompt, system_instruction, ...)         -> GeminiReply
  extract_keywords(text, generate_fn)                -> KeywordAnalysis
  parse_keywords(response, max_keywords)             -> list[str]
  annotate_paragraphs(records, generate_fn)          -> (list[AnnotatedParagraph], TokenUsage)
  build_keyword_index(annotated)                     -> list[dict]
  token_summary(annotated, usage)                    -> dict
"""

from .gemini import generate, GeminiReply, DEFAULT_MODEL
from .keywords import (
    annotate_paragraphs,
    build_keyword_index,
    extract_keywords,
    parse_keywords,
    print_token_summary,
    token_summary,
    MAX_KEYWORDS,
    SYSTEM_INSTRUCTION,
)

__all__ = [
    "generate",
    "GeminiReply",
    "DEFAULT_MODEL",
    "annotate_paragraphs",
    "build_keyword_index",
    "extract_keywords",
    "parse_keywords",
    "print_token_summary",
    "token_summary",
    "MAX_KEYWORDS",
    "SYSTEM_INSTRUCTION",
]
