"""Public API for unitard."""
