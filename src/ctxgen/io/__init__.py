"""Output writing and interruption handling."""
