"""
Cost aggregation for the EKS static cost estimate.

Turns observed resource quantities and configured unit prices into monthly
cost lines, grouped by report section, and keeps the running total.
"""

import logging
from dataclasses import dataclass, field

from eks_cost_toolkit.common.cost_utils import (
    calculate_ebs_storage_cost,
    hourly_to_monthly,
    round_money,
)

from .resources import ClusterResources
from .settings import EstimatorSettings

CONTROL_PLANE_SECTION = ""
EC2_SECTION = "🖥 EC2 worker nodes"
EBS_SECTION = "💾 EBS volumes"
NAT_SECTION = "🌐 NAT gateways"
LOAD_BALANCER_SECTION = "⚖ Load balancers"

SECTION_ORDER = (
    CONTROL_PLANE_SECTION,
    EC2_SECTION,
    EBS_SECTION,
    NAT_SECTION,
    LOAD_BALANCER_SECTION,
)


@dataclass(frozen=True)
class CostLine:
    """One priced row of the report."""

    section: str
    label: str
    monthly_cost: float


@dataclass
class CostBreakdown:
    """Ordered cost lines plus the running monthly total."""

    lines: list[CostLine] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    skipped_instance_types: list[str] = field(default_factory=list)
    total: float = 0.0

    def add(self, section: str, label: str, monthly_cost: float) -> CostLine:
        line = CostLine(section, label, monthly_cost)
        self.lines.append(line)
        self.total = round_money(self.total + monthly_cost)
        return line

    def lines_for(self, section: str) -> list[CostLine]:
        return [line for line in self.lines if line.section == section]


def add_control_plane_cost(breakdown: CostBreakdown, settings: EstimatorSettings) -> None:
    breakdown.add(
        CONTROL_PLANE_SECTION,
        "EKS control plane",
        hourly_to_monthly(settings.eks_control_plane_hourly, settings.hours_per_month),
    )


def add_instance_costs(
    breakdown: CostBreakdown, settings: EstimatorSettings, resources: ClusterResources
) -> None:
    """Price each tallied instance type; unpriced types are skipped with a warning."""
    for instance_type in sorted(resources.instance_counts):
        count = resources.instance_counts[instance_type]
        price = settings.ec2_prices.get(instance_type)
        if price is None:
            logging.warning("No price configured for instance type %s", instance_type)
            breakdown.warnings.append(
                f"No price configured for instance type {instance_type} (skipping)"
            )
            breakdown.skipped_instance_types.append(instance_type)
            continue
        breakdown.add(
            EC2_SECTION,
            f"{count} × {instance_type}",
            hourly_to_monthly(price, settings.hours_per_month, quantity=count),
        )


def add_volume_cost(
    breakdown: CostBreakdown, settings: EstimatorSettings, resources: ClusterResources
) -> None:
    total_gb = resources.total_volume_gb
    breakdown.add(
        EBS_SECTION,
        f"EBS gp3 ({total_gb} GB)",
        calculate_ebs_storage_cost(total_gb, settings.ebs_gp3_per_gb_month),
    )


def add_nat_gateway_cost(
    breakdown: CostBreakdown, settings: EstimatorSettings, resources: ClusterResources
) -> None:
    count = resources.nat_gateway_count
    if count > 0:
        breakdown.add(
            NAT_SECTION,
            f"{count} × NAT Gateway",
            hourly_to_monthly(settings.nat_gateway_hourly, settings.hours_per_month, quantity=count),
        )
    else:
        breakdown.add(NAT_SECTION, "NAT Gateways", 0.0)


def add_load_balancer_costs(
    breakdown: CostBreakdown, settings: EstimatorSettings, resources: ClusterResources
) -> None:
    hours = settings.hours_per_month
    breakdown.add(
        LOAD_BALANCER_SECTION,
        f"{resources.alb_count} × ALB",
        hourly_to_monthly(settings.alb_hourly, hours, quantity=resources.alb_count),
    )
    breakdown.add(
        LOAD_BALANCER_SECTION,
        f"{resources.nlb_count} × NLB",
        hourly_to_monthly(settings.nlb_hourly, hours, quantity=resources.nlb_count),
    )


def build_cost_breakdown(settings: EstimatorSettings, resources: ClusterResources) -> CostBreakdown:
    """
    Price every resource category in report order.

    Args:
        settings: Validated settings holding the unit prices
        resources: Quantities returned by collect_cluster_resources()

    Returns:
        CostBreakdown: Cost lines, warnings and the monthly total
    """
    breakdown = CostBreakdown()
    add_control_plane_cost(breakdown, settings)
    add_instance_costs(breakdown, settings, resources)
    add_volume_cost(breakdown, settings, resources)
    add_nat_gateway_cost(breakdown, settings, resources)
    add_load_balancer_costs(breakdown, settings, resources)
    return breakdown
