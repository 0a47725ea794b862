"""Text to Value reader."""
