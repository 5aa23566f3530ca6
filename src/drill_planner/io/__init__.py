"""JSON conversion for plan requests and responses."""
