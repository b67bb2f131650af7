"""tagparse CLI command implementations."""
