"""Domain layer: warnings, examiners, and errors."""
