"""
Akapity Web API

Aplikacja Flask: wgranie PDF, zapis edytowanego tekstu, ekstrakcja
wybranych / wszystkich akapitów numerowanych z adnotacją słowami kluczowymi.

Usage:
    akp serve
    akp serve --port 5000 --host 0.0.0.0
"""

from __future__ import annotations

from flask import Flask

from llm_query.keywords import GenerateFn
from reconstruct.config import ReconstructionConfig, config_from_env
from store import DocumentStore, open_store
from web.config import Config


def create_app(
    store: DocumentStore | None = None,
    generate_fn: GenerateFn | None = None,
    reconstruction_config: ReconstructionConfig | None = None,
    annotate: bool | None = None,
) -> Flask:
    """Create and configure Flask app."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if annotate is not None:
        app.config["ANNOTATE"] = annotate

    app.extensions["akp"] = {
        "store": store if store is not None else open_store(),
        "generate_fn": generate_fn,
        "reconstruction_config": reconstruction_config or config_from_env(),
    }

    from web.routes import documents_bp

    app.register_blueprint(documents_bp)

    return app
