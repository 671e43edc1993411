"""Shared helpers: line handling, literal serialization and terminal colors."""
