"""HTTP API: bot messaging endpoint and versioned REST routes."""
