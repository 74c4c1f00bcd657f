"""
Integrations for external services and APIs.

This package contains the client for the upstream Yahoo Finance API.
"""
