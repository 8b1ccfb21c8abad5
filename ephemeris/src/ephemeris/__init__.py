"""Planetary longitudes and aspect detection."""
