"""Infrastructure layer: logging setup and the reference record host."""
