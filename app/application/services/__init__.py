"""Application services: card text formatting."""

from app.application.services.card_formatter import build_attachment, format_card_text

__all__ = ["build_attachment", "format_card_text"]
