"""Domain layer — classification of raw values.

This layer depends only on the stdlib, pydantic and ``typewise.errors``.
It must never import from services, output, or config.
"""
