"""Persistence: ticket store engine, ORM models and search repository."""
