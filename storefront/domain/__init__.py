"""Domain layer: entities, value objects, events, errors and repository interfaces."""
