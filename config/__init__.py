"""Tunable constants for the market, advisor and game loop."""
