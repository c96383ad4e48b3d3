"""Persistence adapters mapping domain entities onto a key-value store."""
