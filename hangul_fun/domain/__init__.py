"""Pure Hangul domain logic (no I/O, no logging)."""
