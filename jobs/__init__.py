"""Standalone fixture jobs whose exit status is their result."""
