"""Adapters connecting the core search to files and the console."""
