"""Integration tests driving the client, manager and configuration against a fake heroes service."""
