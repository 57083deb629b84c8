"""Core error types and logging helpers shared across pmshim."""
