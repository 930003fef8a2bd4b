"""Configuration, structured logging, and error tracking."""
