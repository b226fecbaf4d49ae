"""Market generator and game loop."""
