"""Domain layer: entities and errors."""
