"""Sample import."""
