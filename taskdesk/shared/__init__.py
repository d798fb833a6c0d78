"""Shared utilities: request context, logging, and datetime helpers.

Used by domain, application, and infrastructure. No business logic.
"""
