"""Adapters (infrastructure) for SHORTKIT.

Provide concrete implementations of domain ports (storage-backed relation
resolvers), plus persistence mapping and related wiring (engines, metadata,
migrations).

Dependency rule: may import `shortkit.domain`; the domain must not import this
package.
"""
