"""Infrastructure layer: storage stub, clock adapter, observability and metrics."""
