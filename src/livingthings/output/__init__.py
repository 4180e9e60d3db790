"""Output layer: Rich and JSON rendering of decode results."""
