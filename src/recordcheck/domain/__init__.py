"""Domain layer: rules, schemas, and the validation engine.

This layer depends only on stdlib and pydantic.
It never imports from the outer layers.
"""
