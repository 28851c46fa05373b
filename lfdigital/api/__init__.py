"""HTTP API for the L&F Digital site."""
