"""Entrypoints (inbound adapters) for SHORTKIT.

Expose the domain core to the outside world: the ``shortkit`` CLI and HTTP
middleware. Parse inputs, call into the domain and adapters, present results.
"""
