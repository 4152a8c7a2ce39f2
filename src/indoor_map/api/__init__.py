"""HTTP tile server."""
