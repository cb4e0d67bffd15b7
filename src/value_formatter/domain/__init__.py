"""Domain layer — settings models, errors and ports."""
