"""Bundled sample payloads for mock mode."""
