"""Domain-specific realtime event payloads.

These modules should contain *parse* helpers only (payload -> value object).
They must not open connections or register handlers.
"""
