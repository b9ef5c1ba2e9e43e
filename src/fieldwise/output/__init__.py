"""Output layer: human and JSON renderings of decode errors and results."""
