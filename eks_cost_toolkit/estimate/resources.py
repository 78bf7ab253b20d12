"""
Read-only enumeration of the AWS resources that belong to an EKS cluster.

Worker instances carry the ``eks:cluster-name`` tag; volumes, NAT gateways and
load balancers created by Kubernetes carry ``kubernetes.io/cluster/<name>``.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field

from eks_cost_toolkit.common.aws_client_factory import create_ec2_client, create_elbv2_client

EKS_CLUSTER_NAME_TAG = "eks:cluster-name"
KUBERNETES_CLUSTER_TAG_PREFIX = "kubernetes.io/cluster/"
OWNED_TAG_VALUE = "owned"

ACTIVE_INSTANCE_STATES = ["pending", "running"]
ACTIVE_NAT_GATEWAY_STATES = ["pending", "available"]

APPLICATION_LOAD_BALANCER = "application"
NETWORK_LOAD_BALANCER = "network"

# DescribeTags accepts at most 20 resource ARNs per call
DESCRIBE_TAGS_BATCH_SIZE = 20


@dataclass
class ClusterResources:
    """Quantities observed for one cluster."""

    instance_counts: Counter = field(default_factory=Counter)
    volume_sizes_gb: list[int] = field(default_factory=list)
    nat_gateway_count: int = 0
    alb_count: int = 0
    nlb_count: int = 0

    @property
    def total_volume_gb(self) -> int:
        return sum(self.volume_sizes_gb)


def kubernetes_cluster_tag(cluster_name: str) -> str:
    """Return the ownership tag key Kubernetes puts on cluster resources."""
    return f"{KUBERNETES_CLUSTER_TAG_PREFIX}{cluster_name}"


def _owned_tag_filter(cluster_name: str) -> dict:
    return {
        "Name": f"tag:{kubernetes_cluster_tag(cluster_name)}",
        "Values": [OWNED_TAG_VALUE],
    }


def count_instance_types(ec2_client, cluster_name: str) -> Counter:
    """Tally active worker instances of the cluster by instance type."""
    counts = Counter()
    paginator = ec2_client.get_paginator("describe_instances")
    pages = paginator.paginate(
        Filters=[
            {"Name": f"tag:{EKS_CLUSTER_NAME_TAG}", "Values": [cluster_name]},
            {"Name": "instance-state-name", "Values": ACTIVE_INSTANCE_STATES},
        ]
    )
    for page in pages:
        for reservation in page.get("Reservations", []):
            for instance in reservation.get("Instances", []):
                counts[instance["InstanceType"]] += 1
    logging.info("Found %d worker instances for %s", sum(counts.values()), cluster_name)
    return counts


def list_volume_sizes(ec2_client, cluster_name: str) -> list[int]:
    """Return the size in GB of every EBS volume owned by the cluster."""
    sizes = []
    paginator = ec2_client.get_paginator("describe_volumes")
    for page in paginator.paginate(Filters=[_owned_tag_filter(cluster_name)]):
        sizes.extend(volume["Size"] for volume in page.get("Volumes", []))
    logging.info("Found %d EBS volumes for %s", len(sizes), cluster_name)
    return sizes


def count_nat_gateways(ec2_client, cluster_name: str) -> int:
    """Count the NAT gateways owned by the cluster."""
    count = 0
    paginator = ec2_client.get_paginator("describe_nat_gateways")
    pages = paginator.paginate(
        Filter=[
            _owned_tag_filter(cluster_name),
            {"Name": "state", "Values": ACTIVE_NAT_GATEWAY_STATES},
        ]
    )
    for page in pages:
        count += len(page.get("NatGateways", []))
    logging.info("Found %d NAT gateways for %s", count, cluster_name)
    return count


def _describe_all_load_balancers(elbv2_client) -> list[dict]:
    load_balancers = []
    paginator = elbv2_client.get_paginator("describe_load_balancers")
    for page in paginator.paginate():
        load_balancers.extend(page.get("LoadBalancers", []))
    return load_balancers


def _tagged_load_balancer_arns(elbv2_client, arns: list[str], tag_key: str) -> set[str]:
    tagged = set()
    for start in range(0, len(arns), DESCRIBE_TAGS_BATCH_SIZE):
        batch = arns[start : start + DESCRIBE_TAGS_BATCH_SIZE]
        response = elbv2_client.describe_tags(ResourceArns=batch)
        for description in response.get("TagDescriptions", []):
            if any(tag["Key"] == tag_key for tag in description.get("Tags", [])):
                tagged.add(description["ResourceArn"])
    return tagged


def count_load_balancers(elbv2_client, cluster_name: str) -> tuple[int, int]:
    """
    Count the cluster's load balancers by type.

    A load balancer belongs to the cluster when it carries the
    ``kubernetes.io/cluster/<name>`` tag, whatever its value. Types other than
    application and network (e.g. gateway) are not counted.

    Returns:
        tuple: (alb_count, nlb_count)
    """
    load_balancers = _describe_all_load_balancers(elbv2_client)
    if not load_balancers:
        return 0, 0

    arns = [lb["LoadBalancerArn"] for lb in load_balancers]
    tagged = _tagged_load_balancer_arns(elbv2_client, arns, kubernetes_cluster_tag(cluster_name))

    types = Counter(lb.get("Type") for lb in load_balancers if lb["LoadBalancerArn"] in tagged)
    alb_count = types[APPLICATION_LOAD_BALANCER]
    nlb_count = types[NETWORK_LOAD_BALANCER]
    logging.info("Found %d ALBs and %d NLBs for %s", alb_count, nlb_count, cluster_name)
    return alb_count, nlb_count


def collect_cluster_resources(session, cluster_name: str) -> ClusterResources:
    """
    Run every read-only query for the cluster, one after another.

    Args:
        session: boto3 session bound to the configured profile and region
        cluster_name: EKS cluster name used in the ownership tags

    Returns:
        ClusterResources: Observed quantities

    Raises:
        botocore.exceptions.ClientError: If any AWS query fails
    """
    ec2_client = create_ec2_client(session)
    elbv2_client = create_elbv2_client(session)

    resources = ClusterResources(
        instance_counts=count_instance_types(ec2_client, cluster_name),
        volume_sizes_gb=list_volume_sizes(ec2_client, cluster_name),
        nat_gateway_count=count_nat_gateways(ec2_client, cluster_name),
    )
    resources.alb_count, resources.nlb_count = count_load_balancers(elbv2_client, cluster_name)
    return resources
