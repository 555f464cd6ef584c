"""Domain layer: entities and errors of the analysis engine."""
