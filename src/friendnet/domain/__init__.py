"""Domain layer — the friendship graph engine and its error taxonomy.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""
