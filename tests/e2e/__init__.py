"""
Browser test package for the card delivery form.

This package contains Playwright-based end-to-end tests that drive the
externally running delivery app through its rendered DOM.
"""
