"""Ticket search messaging extension service."""
