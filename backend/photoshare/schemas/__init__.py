"""Response schemas for the PhotoShare API."""
