"""Schedule generation, storage and persistence."""
