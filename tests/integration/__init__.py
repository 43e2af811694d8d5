"""Integration tests driving the HTTP services end to end."""
