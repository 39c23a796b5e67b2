"""Question CRUD and search."""
