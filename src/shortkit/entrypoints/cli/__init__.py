"""The ``shortkit`` command-line interface."""
