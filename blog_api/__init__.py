"""Blog posts REST API."""
