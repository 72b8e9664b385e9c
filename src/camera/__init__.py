"""Primary-ray generation."""
