"""Offline tests run against in-memory fakes of the Playwright API."""
