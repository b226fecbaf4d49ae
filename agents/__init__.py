"""Advisor agents that recommend period decisions."""
