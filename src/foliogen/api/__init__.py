"""HTTP API for portfolio generation and rendering."""
