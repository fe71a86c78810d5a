"""Translation Hub API package."""
