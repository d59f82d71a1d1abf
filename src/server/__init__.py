"""HTTP API for tocnav."""
