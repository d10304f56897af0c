"""HTTP API for Dream Cinema."""
