"""Shared test constants for estimator settings and expected figures.

This module defines the literal settings used across test files so the
expected monthly figures stay consistent everywhere.
"""

# A complete settings file, one KEY=value per line
VALID_ENV_LINES = [
    "CLUSTER_NAME=demo",
    "AWS_PROFILE=demo-profile",
    "AWS_REGION=eu-west-2",
    "HOURS_PER_MONTH=730",
    "EKS_CONTROL_PLANE_HOURLY=0.10",
    "EBS_GP3_PER_GB_MONTH=0.08",
    "NAT_GATEWAY_HOURLY=0.05",
    "ALB_HOURLY=0.025",
    "NLB_HOURLY=0.03",
    "EC2_T3_MEDIUM=0.0416",
    "EC2_M5_LARGE=0.096",
]

# Monthly figures for the settings above (730 hours)
TEST_CONTROL_PLANE_MONTHLY = 73.0
TEST_THREE_T3_MEDIUM_MONTHLY = 91.1
TEST_ONE_M5_LARGE_MONTHLY = 70.08
TEST_FIFTY_GB_EBS_MONTHLY = 4.0
TEST_TWO_NAT_GATEWAYS_MONTHLY = 73.0
TEST_ONE_ALB_MONTHLY = 18.25
TEST_TWO_NLB_MONTHLY = 43.8
TEST_FULL_CLUSTER_TOTAL = 373.23
