"""Rule selection commands."""
