"""Document types catalog API."""
