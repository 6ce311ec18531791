"""Domain layer: skill curves, entities and the skill aggregate."""
