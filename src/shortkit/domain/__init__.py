"""Domain layer for SHORTKIT.

Contains business rules: the short URL aggregate, value objects, input models,
and outbound ports (short code generation, relation resolution) that the
application depends on. This package is deliberately technology-agnostic.

Dependency rule: do not import from `shortkit.adapters` or `shortkit.entrypoints`.
"""
