"""ASGI plumbing — request handling, error mapping and response sending."""
