"""Service layer — roster loading and layout operations returning ServiceResult.

Services may import from the domain layer.
They must never import from commands or output.
"""
