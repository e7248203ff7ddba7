"""Meeting scheduling-coordination service."""
