"""Application layer — the formatter and its stateless entry points."""
