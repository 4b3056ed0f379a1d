"""Infrastructure layer — graph construction from in-memory edge lists."""
