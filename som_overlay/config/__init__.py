"""Configuration for the overlay package."""
