"""Runtime layer: dispatch, resilience and observability."""
