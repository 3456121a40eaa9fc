"""Domain layer — people, enums, and the desk layout algorithm.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
