"""Utility modules for nameuuid."""
