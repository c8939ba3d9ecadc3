"""Domain model, storage and console loop."""
