"""Domain layer: shapes, structural wrappers, scenes, factories, visitors.

This layer depends only on stdlib and rich (for the Console it draws to).
It must never import from services, infrastructure, commands, or config.
"""
