"""Application use cases: one entry point per workflow."""

from app.application.use_cases.messaging_extension import MessagingExtension

__all__ = ["MessagingExtension"]
