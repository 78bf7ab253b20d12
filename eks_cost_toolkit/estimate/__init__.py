"""
EKS Static Cost Estimate Package
Provides settings loading, resource enumeration, cost aggregation and reporting.
"""

from .pricing import build_cost_breakdown
from .report import print_cost_report
from .resources import collect_cluster_resources
from .settings import load_settings

__all__ = [
    "build_cost_breakdown",
    "collect_cluster_resources",
    "load_settings",
    "print_cost_report",
]
