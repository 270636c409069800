"""Infrastructure layer: process-level measurement helpers.

This layer depends on stdlib only.
It must never import from domain, services, commands, or output.
"""
