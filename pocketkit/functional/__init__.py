"""Function composition and wrapping helpers."""
