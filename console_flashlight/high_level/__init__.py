"""High-level services used by the phases."""
