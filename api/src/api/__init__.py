"""HTTP API for chart computation."""
