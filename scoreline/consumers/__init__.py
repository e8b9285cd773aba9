"""Consumers of provider data."""
