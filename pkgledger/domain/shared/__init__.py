"""Shared domain building blocks: errors, events, outbox, base classes."""
