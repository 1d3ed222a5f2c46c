"""Analysis methods built on trained maps."""
