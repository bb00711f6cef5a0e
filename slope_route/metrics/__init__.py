"""
Metrics Module
==============

Route statistics.
"""

from .route_metrics import RouteMetrics, heading_changes

__all__ = [
    'RouteMetrics',
    'heading_changes',
]
