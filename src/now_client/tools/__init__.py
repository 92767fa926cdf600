"""Endpoint callers; each takes a NowClient and maps to a single request."""
