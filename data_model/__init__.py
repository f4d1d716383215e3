"""
data_model — struktury danych projektu Akapity.

Użycie:
  from data_model import ParagraphRecord, LineKind, NumberingPolicy, ...

Moduły:
  paragraphs — LineKind, LineClass, LineRecord, ParagraphRecord,
               ExtractionRequest, NumberingPolicy, NOISE_KINDS
  documents  — StoredDocument, TokenUsage, KeywordAnalysis, AnnotatedParagraph
"""

from .paragraphs import (
    NOISE_KINDS,
    ExtractionRequest,
    LineClass,
    LineKind,
    LineRecord,
    NumberingPolicy,
    ParagraphRecord,
)
from .documents import (
    AnnotatedParagraph,
    KeywordAnalysis,
    StoredDocument,
    TokenUsage,
)

__all__ = [
    # paragraphs
    "NOISE_KINDS",
    "ExtractionRequest",
    "LineClass",
    "LineKind",
    "LineRecord",
    "NumberingPolicy",
    "ParagraphRecord",
    # documents
    "AnnotatedParagraph",
    "KeywordAnalysis",
    "StoredDocument",
    "TokenUsage",
]
