"""Infrastructure shared across the overlay package."""
