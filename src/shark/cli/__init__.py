"""Click command-line surface for Shark Tool."""
