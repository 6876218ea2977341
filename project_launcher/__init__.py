"""Project discovery and usage ranking for a project launcher."""
