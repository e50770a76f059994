"""I/O layer: result cache and external HTTP clients."""
