"""Core: exceptions and logging."""
