"""Shared enumerations."""
