"""Behave features for The Internet demo site."""
