# github_manager package
"""Typed client for the GitHub REST API."""

__version__ = '1.0.0'
