"""
Web route blueprints.

- documents_routes: upload PDF, zapis edytowanego tekstu, ekstrakcja akapitów
"""

from web.routes.documents_routes import documents_bp

__all__ = ["documents_bp"]
