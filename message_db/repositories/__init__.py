"""Table repositories."""
