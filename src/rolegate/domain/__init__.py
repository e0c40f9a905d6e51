"""Domain layer - entities, value objects, subject mixins."""
