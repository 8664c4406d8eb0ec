"""Domain layer: enums, value objects, events, protocols and pure services."""
