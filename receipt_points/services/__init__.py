"""Service layer: receipt validation, points scoring and score storage."""
