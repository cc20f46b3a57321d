"""
Shared utilities for the group matching engine.

This package aggregates common building blocks consumed by the engine and
its operator scripts:

- config: Engine configuration via pydantic-settings
- logging: Structured logging with correlation context
- errors: Canonical error types and responses

Do not import from service_* packages into shared/.
"""
