"""Application layer: orchestration over domain services and ports."""
