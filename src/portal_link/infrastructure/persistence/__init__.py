"""Persistence adapters for the portal link domain."""
