"""Adapters — filesystem bindings for the discovery and write collaborators."""
