"""
Pipeline Module
===============

End-to-end planning runs.
"""

from .runner import RouteRunner, RunResult

__all__ = [
    'RouteRunner',
    'RunResult',
]
