"""Core domain layer: exceptions and the seeding pipeline."""
