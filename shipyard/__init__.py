"""Shipyard - squadron rules engine for starship miniatures."""
