"""Infrastructure layer - storage, factories, security and cross-cutting concerns."""
