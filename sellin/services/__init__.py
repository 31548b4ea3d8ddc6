"""Sellin TN services."""
