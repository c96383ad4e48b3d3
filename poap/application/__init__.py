"""Application layer - use cases (CQRS commands and queries).

Handlers orchestrate domain entities and repositories injected through
protocols. They return Result types and never raise for rule violations.
"""
