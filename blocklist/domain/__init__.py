"""Domain-level types and rules for batch mutations.

Nothing in here knows about HTTP or SQL; the batch service produces these
values and the API layer decides how to present them.
"""
