"""Configuration, logging, metrics and dependency wiring."""
