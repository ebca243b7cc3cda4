"""Shipping API package."""
