"""Manifest loading."""
