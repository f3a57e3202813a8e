"""HTTP API endpoints."""
