"""Core infrastructure: dependency wiring and synchronization primitives."""
