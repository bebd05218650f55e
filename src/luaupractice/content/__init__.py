"""Bundled challenge and snippet content."""
