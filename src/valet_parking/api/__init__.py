"""HTTP API for the parking facility."""
