"""Arkanoid - brick-breaking with a pointer-driven paddle."""
