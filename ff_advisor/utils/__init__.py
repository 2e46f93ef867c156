"""Shared helpers: configuration tables, caching, rate limiting, logging."""
