"""Infrastructure layer — concrete adapters for domain ports."""
