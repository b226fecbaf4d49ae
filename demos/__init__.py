"""Runnable demonstrations and the console driver."""
