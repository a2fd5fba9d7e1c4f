"""Application layer — use cases and notification wiring."""
