"""Shopping list desktop widget."""
