"""Domain layer — digit arithmetic and key encoding.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""
