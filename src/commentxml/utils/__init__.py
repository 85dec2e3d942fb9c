"""Internal helpers for commentxml."""
