"""
llm_query/keywords.py — słowa kluczowe akapitów (model językowy) i indeks słów.

Warstwa opcjonalna nad rdzeniem: rdzeń jej nie wywołuje ani od niej nie zależy.
Błąd modelu dla jednego akapitu nie przerywa przetwarzania — akapit dostaje
pustą listę słów i komunikat błędu w KeywordAnalysis.error.

Format odpowiedzi modelu: słowa kluczowe w gwiazdkach, np.
  *migración*, *derechos humanos*, *discriminación*

Publiczne API:
  extract_keywords(text, generate_fn, max_keywords)   -> KeywordAnalysis
  parse_keywords(response, max_keywords)              -> list[str]
  annotate_paragraphs(records, generate_fn)           -> (list[AnnotatedParagraph], TokenUsage)
  build_keyword_index(annotated)                      -> list[dict]
  token_summary(annotated, usage)                     -> dict
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence

from rich.console import Console

from data_model.documents import AnnotatedParagraph, KeywordAnalysis, TokenUsage
from data_model.paragraphs import ParagraphRecord
from llm_query.gemini import GeminiReply, generate

MAX_KEYWORDS   = 15
PREVIEW_CHARS  = 100
ERROR_RESPONSE = "Error al analizar el texto"

SYSTEM_INSTRUCTION = (
    "Extrae exactamente 15 palabras clave más importantes del texto proporcionado. "
    "Cada palabra clave debe ser una sola palabra. No uses guiones, comas ni "
    "caracteres adicionales para unir palabras clave. No repitas palabras clave "
    "dentro del mismo conjunto de 15. Asegúrate de que todas las palabras clave "
    "sean relevantes y tengan significado en el contexto del texto. Formatea las "
    "palabras clave poniendo cada una entre asteriscos, por ejemplo: *migración*, "
    "*derechos humanos*, *discriminación*."
)

GenerateFn = Callable[..., GeminiReply]

_STARRED_RE = re.compile(r"\*(.*?)\*", re.DOTALL)
_BOLD_RE    = re.compile(r"\*{2,}")

console = Console(stderr=True)


def parse_keywords(response: str, max_keywords: int = MAX_KEYWORDS) -> list[str]:
    """
    Wyciąga słowa w gwiazdkach. Markdown "**słowo**" jest traktowany jak "*słowo*".
    Duplikaty (bez rozróżniania wielkości liter) i puste wpisy są pomijane.
    """
    text = _BOLD_RE.sub("*", response)
    seen: set[str] = set()
    out: list[str] = []
    for raw in _STARRED_RE.findall(text):
        kw = " ".join(raw.split())
        if not kw or kw.casefold() in seen:
            continue
        seen.add(kw.casefold())
        out.append(kw)
        if len(out) >= max_keywords:
            break
    return out


def extract_keywords(
    text: str,
    generate_fn: GenerateFn | None = None,
    max_keywords: int = MAX_KEYWORDS,
) -> KeywordAnalysis:
    generate_fn = generate_fn or generate
    try:
        reply = generate_fn(
            text,
            system_instruction=SYSTEM_INSTRUCTION,
            temperature=0.2,
            max_output_tokens=1024,
        )
    except Exception as e:
        console.print(f"[red]Błąd ekstrakcji słów kluczowych:[/red] {e}")
        return KeywordAnalysis(full_response=ERROR_RESPONSE, error=str(e))

    response = reply.text.strip()
    return KeywordAnalysis(
        full_response=response,
        keywords=parse_keywords(response, max_keywords),
        token_usage=reply.usage,
    )


def annotate_paragraphs(
    records: Iterable[ParagraphRecord],
    generate_fn: GenerateFn | None = None,
    max_keywords: int = MAX_KEYWORDS,
) -> tuple[list[AnnotatedParagraph], TokenUsage]:
    annotated: list[AnnotatedParagraph] = []
    usage = TokenUsage()
    for record in records:
        analysis = extract_keywords(record.text, generate_fn, max_keywords)
        usage = usage + analysis.token_usage
        annotated.append(AnnotatedParagraph(
            paragraph=record,
            ai_analysis=analysis.full_response,
            keywords=analysis.keywords,
        ))
    return annotated, usage


def build_keyword_index(annotated: Sequence[AnnotatedParagraph]) -> list[dict]:
    """
    Indeks: słowo kluczowe → akapity, w których wystąpiło.

    Kolejność słów = kolejność pierwszego wystąpienia; podgląd akapitu to
    pierwsze 100 znaków + "...".
    """
    index: dict[str, dict] = {}
    for item in annotated:
        for keyword in item.keywords:
            entry = index.setdefault(keyword, {"keyword": keyword, "paragraphs": []})
            entry["paragraphs"].append({
                "number": item.paragraph.number,
                "text": item.paragraph.text[:PREVIEW_CHARS] + "...",
            })
    return list(index.values())


def token_summary(annotated: Sequence[AnnotatedParagraph], usage: TokenUsage) -> dict:
    count = len(annotated)
    average = round(usage.total / count) if count else 0
    return {"total": usage.total, "averagePerParagraph": average}


def print_token_summary(annotated: Sequence[AnnotatedParagraph], usage: TokenUsage) -> None:
    summary = token_summary(annotated, usage)
    console.print(
        f"[dim]Tokeny:[/dim] {len(annotated)} akapitów, "
        f"wejście {usage.prompt}, wyjście {usage.completion}, "
        f"łącznie [bold]{summary['total']}[/bold] "
        f"(średnio {summary['averagePerParagraph']} na akapit)"
    )
