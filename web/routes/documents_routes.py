"""
Documents routes blueprint.

- POST /process-pdf            - upload PDF → surowy tekst + pdfId
- POST /save-edited-text       - zapis tekstu poprawionego przez użytkownika
- POST /extract-from-edited    - wybrane akapity (+ słowa kluczowe)
- POST /extract-all-paragraphs - wszystkie rozpoznane akapity (+ słowa kluczowe)
- GET  /documents/<pdf_id>     - podgląd dokumentu z magazynu
"""

from __future__ import annotations

from collections.abc import Sequence

from flask import Blueprint, current_app, jsonify, request
from rich.console import Console

from data_model.documents import AnnotatedParagraph, StoredDocument, TokenUsage
from data_model.paragraphs import ParagraphRecord
from llm_query.keywords import (
    annotate_paragraphs,
    build_keyword_index,
    print_token_summary,
    token_summary,
)
from pdf.extractor import IngestionError, extract_text
from reconstruct import InputError, extract_all_paragraphs, extract_paragraphs
from validator import RequestError, parse_extract, parse_extract_all, parse_save_edited

documents_bp = Blueprint('documents', __name__)

console = Console(stderr=True)


def _ext() -> dict:
    return current_app.extensions["akp"]


def _load_document(pdf_id: str) -> StoredDocument | None:
    return _ext()["store"].get(pdf_id)


@documents_bp.errorhandler(RequestError)
def _request_error(e: RequestError):
    return jsonify(e.to_dict()), 400


@documents_bp.errorhandler(InputError)
def _input_error(e: InputError):
    return jsonify({"error": str(e), "details": []}), 400


@documents_bp.route('/process-pdf', methods=['POST'])
def process_pdf():
    upload = request.files.get('pdf')
    if upload is None or not upload.filename:
        return "No PDF file uploaded.", 400

    try:
        raw_text = extract_text(upload.read())
    except IngestionError as e:
        console.print(f"[red]Błąd przetwarzania PDF[/red] {upload.filename}: {e}")
        return "Error processing PDF.", 500

    doc = _ext()["store"].create(upload.filename, raw_text)
    return jsonify({"rawText": raw_text, "pdfId": doc.doc_id})


@documents_bp.route('/save-edited-text', methods=['POST'])
def save_edited_text():
    pdf_id, edited_text = parse_save_edited(request.get_json(silent=True))

    if not _ext()["store"].update_edited(pdf_id, edited_text):
        return "PDF not found", 404

    return jsonify({"success": True, "message": "Text edited successfully"})


@documents_bp.route('/extract-from-edited', methods=['POST'])
def extract_from_edited():
    pdf_id, numbers, policy = parse_extract(request.get_json(silent=True))

    doc = _load_document(pdf_id)
    if doc is None:
        return "PDF not found", 404

    records = extract_paragraphs(
        doc.edited_text, numbers, policy, _ext()["reconstruction_config"],
    )
    return jsonify(_annotated_response(records))


@documents_bp.route('/extract-all-paragraphs', methods=['POST'])
def extract_all():
    pdf_id, policy = parse_extract_all(request.get_json(silent=True))

    doc = _load_document(pdf_id)
    if doc is None:
        return "PDF not found", 404

    records = extract_all_paragraphs(
        doc.edited_text, policy, _ext()["reconstruction_config"],
    )
    return jsonify(_annotated_response(records))


@documents_bp.route('/documents/<pdf_id>')
def get_document(pdf_id: str):
    doc = _load_document(pdf_id)
    if doc is None:
        return "PDF not found", 404
    return jsonify(doc.to_dict())


def _annotated_response(records: Sequence[ParagraphRecord]) -> dict:
    if current_app.config.get("ANNOTATE", True):
        annotated, usage = annotate_paragraphs(records, _ext()["generate_fn"])
        print_token_summary(annotated, usage)
    else:
        annotated = [AnnotatedParagraph(paragraph=r, ai_analysis="", keywords=[]) for r in records]
        usage = TokenUsage()

    return {
        "extractedParagraphs": [a.to_dict() for a in annotated],
        "keywordIndex": build_keyword_index(annotated),
        "tokenUsage": token_summary(annotated, usage),
    }
