"""SuperSync email and contact management API."""
