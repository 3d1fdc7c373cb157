"""Shared helpers: typed errors, logging setup and span utilities."""
