"""Infrastructure layer: ticket store access and backend exceptions."""
