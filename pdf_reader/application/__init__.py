"""Application layer: orchestration of the reader session."""
