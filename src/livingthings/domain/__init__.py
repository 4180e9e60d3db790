"""Domain layer: tables, enums, and the opaque identifier codec.

This layer depends only on stdlib.
It must never import from validation, config, commands, or output.
"""
