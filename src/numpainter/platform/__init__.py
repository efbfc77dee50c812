"""Concrete Canvas implementations."""
