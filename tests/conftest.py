"""
Pytest configuration.

Wspólne fixtures: przykładowe teksty dokumentów i atrapa modelu językowego
(testy nie wołają Gemini, nie potrzebują PostgreSQL ani PyMuPDF).
"""

from __future__ import annotations

import pytest

from data_model.documents import TokenUsage
from llm_query.gemini import GeminiReply


# ============================================================================
# Teksty dokumentów
# ============================================================================

@pytest.fixture
def simple_text() -> str:
    return (
        "1. Primera oración del párrafo uno.\n"
        "2. Segunda oración del párrafo dos que continúa\n"
        "en la siguiente línea.\n"
        "08-63561\n"
        "3. Tercer párrafo."
    )


@pytest.fixture
def footnote_text() -> str:
    """Akapit 1 przerwany blokiem przypisów zamkniętym numerem strony."""
    return "\n".join([
        "1. El Estado debe garantizar el acceso a la educación",
        "____________________",
        "1 Véase la Observación general Nº 13.",
        "2 Informe del Relator Especial (2008).",
        "-3-",
        "de todos los niños migrantes.",
        "2. El segundo párrafo trata de la salud.",
    ])


@pytest.fixture
def gap_text() -> str:
    """Numeracja 1, 2, 4, 5 — brak akapitu 3."""
    return "\n".join([
        "1. Uno.",
        "2. Dos.",
        "4. Cuatro.",
        "5. Cinco.",
    ])


@pytest.fixture
def report_text() -> str:
    """Fragment raportu ONZ: stopka z symbolem, sekcje, cytaty, przypisy."""
    return "\n".join([
        "GE.08-63561 (S) 270508",
        "A. Introducción",
        "1. El presente informe se presenta de conformidad con",
        "la resolución del Consejo.",
        "2. El Relator Especial visitó el país",
        "12 Informe anual del Comité, párr. 4.",
        "Documento oficial de la Asamblea.",
        "y se reunió con autoridades nacionales.",
        "B. Marco jurídico",
        "3. La Constitución reconoce el derecho a la salud.",
        "4. Véase también el documento A/HRC/7/3.",
        "a) Salud",
        "5. El acceso a servicios es limitado.",
        "-2-",
        "(S)",
    ])


# ============================================================================
# Atrapa modelu językowego
# ============================================================================

class FakeGenerate:
    """Zwraca zadane odpowiedzi po kolei i zapamiętuje wywołania."""

    def __init__(self, replies: list[str | Exception], tokens: int = 10) -> None:
        self.replies = list(replies)
        self.tokens = tokens
        self.calls: list[dict] = []

    def __call__(self, prompt: str, **kwargs) -> GeminiReply:
        self.calls.append({"prompt": prompt, **kwargs})
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return GeminiReply(
            text=reply,
            usage=TokenUsage(prompt=self.tokens, completion=self.tokens, total=2 * self.tokens),
        )


@pytest.fixture
def fake_generate():
    return FakeGenerate(["*migración*, *salud*, *educación*"])


@pytest.fixture
def make_generate():
    """Fabryka atrap z własną listą odpowiedzi (napis albo wyjątek)."""
    return FakeGenerate
