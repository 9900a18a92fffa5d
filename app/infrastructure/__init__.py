"""Infrastructure adapters (persistence, memory store, security, services)."""
