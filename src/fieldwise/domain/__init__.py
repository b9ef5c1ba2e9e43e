"""Domain layer: tree value types, errors, and results.

This layer depends only on stdlib and pydantic.
It must never import from decoder, fields, output, or config.
"""
