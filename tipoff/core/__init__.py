"""Core entities and progression rules."""
