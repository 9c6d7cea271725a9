"""Application layer - use cases, resources and actions built on the domain."""
