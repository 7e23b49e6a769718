"""Shared helpers for the lumen package."""
