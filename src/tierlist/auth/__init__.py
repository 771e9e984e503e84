"""Caller identity and template authorization."""
