"""Service layer: scene operations returning ServiceResult.

Services may import from domain, widgets, and infrastructure layers.
They must never import from commands or output.
"""
