"""Scene driver: random shape generation, composition and records."""
