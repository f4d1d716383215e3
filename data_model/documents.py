"""
data_model/documents.py — dokumenty w magazynie i wyniki adnotacji słowami kluczowymi.

StoredDocument odpowiada jednemu wgranemu plikowi: tekst oryginalny
(z ekstrakcji) i tekst edytowany przez użytkownika, z którego liczone są akapity.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from data_model.paragraphs import ParagraphRecord


@dataclass(slots=True)
class StoredDocument:
    doc_id: str           # "<nazwa pliku>_<epoch ms>"
    file_name: str
    original_text: str
    edited_text: str      # początkowo równy original_text

    def to_dict(self) -> dict:
        return {
            "pdfId": self.doc_id,
            "fileName": self.file_name,
            "originalText": self.original_text,
            "editedText": self.edited_text,
        }


@dataclass(slots=True)
class TokenUsage:
    prompt: int = 0
    completion: int = 0
    total: int = 0

    def __add__(self, other: TokenUsage) -> TokenUsage:
        return TokenUsage(
            prompt=self.prompt + other.prompt,
            completion=self.completion + other.completion,
            total=self.total + other.total,
        )


@dataclass(slots=True)
class KeywordAnalysis:
    full_response: str
    keywords: list[str] = field(default_factory=list)
    token_usage: TokenUsage = field(default_factory=TokenUsage)
    error: str | None = None      # komunikat błędu modelu (analiza pusta)


@dataclass(slots=True)
class AnnotatedParagraph:
    paragraph: ParagraphRecord
    ai_analysis: str
    keywords: list[str]

    def to_dict(self) -> dict:
        return {
            **self.paragraph.to_dict(),
            "aiAnalysis": self.ai_analysis,
            "keywords": list(self.keywords),
        }
