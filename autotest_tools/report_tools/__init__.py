"""Allure reporting helpers for the UI suite."""
