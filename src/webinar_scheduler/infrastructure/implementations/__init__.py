"""Concrete repository implementations, one sub-package per provider."""
