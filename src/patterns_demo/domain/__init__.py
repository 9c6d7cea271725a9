"""Domain layer - entities, value objects and contracts with no infrastructure concerns."""
