"""Configuration for the data parser."""
