"""Output layer — renders ServiceResult for terminals or as JSON."""
