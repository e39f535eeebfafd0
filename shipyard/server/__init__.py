"""HTTP API for Shipyard."""
