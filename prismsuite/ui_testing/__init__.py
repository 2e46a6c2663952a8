"""Playwright UI framework, page objects and live scenarios."""
