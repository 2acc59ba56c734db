"""
authorsite Modules
==================

Flask blueprints for the public API, admin stats and health check.
"""

__all__ = ['newsletter', 'contact', 'admin', 'health']
