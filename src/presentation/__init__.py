"""HTTP presentation layer."""
