"""Low-level rendering and console I/O."""
