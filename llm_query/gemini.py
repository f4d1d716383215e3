"""
llm_query/gemini.py — pojedyncze zapytanie do Gemini z instrukcją systemową.

Konfiguracja (środowisko lub plik .env w katalogu projektu):
  GEMINI_API_KEY     klucz API — bez niego generate() rzuca ValueError
  AKP_GEMINI_MODEL   nazwa modelu, domyślnie gemini-2.5-flash

Zwracany GeminiReply niesie tekst odpowiedzi i zużycie tokenów
(usage_metadata), które annotator sumuje dla całego żądania.

Publiczne API:
  generate(prompt, system_instruction=None, temperature=0.2,
           max_output_tokens=1024, model, api_key, max_retries) -> GeminiReply
"""

from __future__ import annotations

import functools
import os
import pathlib
import re
import time
from dataclasses import dataclass
from typing import Protocol, cast

from dotenv import load_dotenv
from google import genai as _genai
from google.genai import errors as _genai_errors
from google.genai import types as _genai_types
from rich.console import Console

from data_model.documents import TokenUsage

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env", override=False)

DEFAULT_MODEL   = os.getenv("AKP_GEMINI_MODEL", "gemini-2.5-flash")
DEFAULT_RETRIES = 3
_ENV_KEY        = "GEMINI_API_KEY"

# "Please retry in 18.8s" → 18.8
_RETRY_HINT_RE = re.compile(r"retry[^\d]*(\d+(?:\.\d+)?)\s*s", re.IGNORECASE)

err_console = Console(stderr=True)


@dataclass(slots=True)
class GeminiReply:
    text: str
    usage: TokenUsage


class _Usage(Protocol):
    prompt_token_count: int | None
    candidates_token_count: int | None
    total_token_count: int | None


class _Response(Protocol):
    text: str | None
    usage_metadata: _Usage | None


class _Models(Protocol):
    def generate_content(
        self,
        *,
        model: str,
        contents: str,
        config: _genai_types.GenerateContentConfig,
    ) -> _Response:
        ...


@functools.lru_cache(maxsize=4)
def _client_for(api_key: str) -> "_genai.Client":
    # Jeden klient (i jego pula HTTP) na klucz, współdzielony między akapitami.
    return _genai.Client(api_key=api_key)


# ---------------------------------------------------------------------------
# Rate-limit (429)
# ---------------------------------------------------------------------------

def _suggested_wait(error: Exception) -> float | None:
    m = _RETRY_HINT_RE.search(str(error))
    if m:
        return float(m.group(1))
    hinted = getattr(error, "retry_delay", None)
    return float(hinted) if hinted is not None else None


def _wait_before_retry(error: _genai_errors.ClientError, attempt: int, max_retries: int, model: str) -> float:
    """
    Czas oczekiwania przed kolejną próbą po 429.

    Wyczerpany limit dzienny ("PerDay") i przekroczona liczba prób kończą
    się RuntimeError.
    """
    if "PerDay" in str(error):
        raise RuntimeError(
            f"Wyczerpany dzienny limit zapytań modelu {model} "
            f"(https://ai.dev/rate-limit). Odpowiedź API: {error}"
        ) from error
    if attempt > max_retries:
        raise RuntimeError(
            f"Model {model} nadal zwraca 429 po {max_retries} ponowieniach."
        ) from error
    return _suggested_wait(error) or 5.0 * 2 ** attempt


def _usage(response: _Response) -> TokenUsage:
    meta = response.usage_metadata
    if meta is None:
        return TokenUsage()
    prompt     = meta.prompt_token_count or 0
    completion = meta.candidates_token_count or 0
    return TokenUsage(
        prompt=prompt,
        completion=completion,
        total=meta.total_token_count or prompt + completion,
    )


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def generate(
    prompt: str,
    system_instruction: str | None = None,
    temperature: float = 0.2,
    max_output_tokens: int = 1024,
    model: str = DEFAULT_MODEL,
    api_key: str | None = None,
    max_retries: int = DEFAULT_RETRIES,
) -> GeminiReply:
    """
    Raises:
        ValueError:   brak GEMINI_API_KEY (i api_key).
        RuntimeError: pusta odpowiedź, limit dzienny, wyczerpane ponowienia.
        google.genai.errors.APIError: pozostałe błędy API (bez ponawiania).
    """
    key = api_key or os.getenv(_ENV_KEY)
    if not key:
        raise ValueError(
            f"Nie ustawiono {_ENV_KEY} — adnotacja słowami kluczowymi wymaga klucza Gemini API."
        )

    models = cast(_Models, _client_for(key).models)
    config = _genai_types.GenerateContentConfig(
        system_instruction=system_instruction,
        temperature=temperature,
        max_output_tokens=max_output_tokens,
    )

    attempt = 0
    while True:
        try:
            response = models.generate_content(model=model, contents=prompt, config=config)
        except _genai_errors.ClientError as exc:
            if exc.code != 429:
                raise
            attempt += 1
            delay = _wait_before_retry(exc, attempt, max_retries, model)
            err_console.print(
                f"[yellow]429[/yellow] {model}: ponowienie {attempt}/{max_retries} za {delay:.0f}s"
            )
            time.sleep(delay)
            continue

        if response.text is None:
            raise RuntimeError(f"Model {model} nie zwrócił tekstu odpowiedzi.")
        return GeminiReply(text=response.text, usage=_usage(response))
