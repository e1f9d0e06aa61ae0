"""Pure business rules."""
