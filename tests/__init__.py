"""Test suite for the attendance badge registry.

- unit/: domain rules, handlers, adapters in isolation
- integration/: the contract running against a Redis emulation
"""
