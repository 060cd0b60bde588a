"""Status bar desktop entrypoint."""
