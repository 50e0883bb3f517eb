"""Domain layer: pure dashboard concepts with no I/O."""
