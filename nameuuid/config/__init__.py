"""Configuration for nameuuid."""
