"""Domain layer: the card text format and everything computed from it."""
