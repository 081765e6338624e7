"""Domain layer: entities, repository contracts and field name constants."""
