"""Infrastructure: configuration file loading, merging, validation, paths."""
