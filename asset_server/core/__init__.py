"""Core configuration, logging and wiring."""
