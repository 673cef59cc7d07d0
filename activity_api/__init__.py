"""Activity stream HTTP API package."""
