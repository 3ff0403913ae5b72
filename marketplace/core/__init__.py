"""Domain core: exceptions and pure business rules."""
