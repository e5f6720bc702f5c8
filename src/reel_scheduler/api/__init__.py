"""Reference HTTP server for the remote video store."""
