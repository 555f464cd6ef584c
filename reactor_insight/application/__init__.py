"""Application layer: use cases orchestrating the Reactor client."""
