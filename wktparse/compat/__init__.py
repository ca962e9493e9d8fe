"""Adapters to third-party geometry libraries."""
