"""Task document commands."""
