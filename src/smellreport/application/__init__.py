"""Application layer: formatting and reporting."""
