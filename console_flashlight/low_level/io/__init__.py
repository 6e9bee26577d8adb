"""Output backends."""
