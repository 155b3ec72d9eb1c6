"""Lens Tracker application package."""
