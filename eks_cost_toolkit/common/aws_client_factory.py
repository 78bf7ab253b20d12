#!/usr/bin/env python3
"""
AWS Client Factory Module
Provides standardized boto3 session and client creation for the estimator.
"""

import logging

import boto3


def create_session(profile_name: str, region: str):
    """
    Create a boto3 session bound to a named credentials profile and region.

    Args:
        profile_name: Profile from the shared AWS config/credentials files
        region: AWS region name (e.g., 'eu-west-2')

    Returns:
        boto3.Session: Session used to create every client of a run

    Raises:
        botocore.exceptions.ProfileNotFound: If the profile is not configured
    """
    logging.info("Creating AWS session for profile %s in %s", profile_name, region)
    return boto3.Session(profile_name=profile_name, region_name=region)


def create_client(service_name: str, session):
    """
    Create a boto3 client for any AWS service from an existing session.

    Args:
        service_name: AWS service name (e.g., 'ec2', 'elbv2')
        session: Session returned by create_session()

    Returns:
        boto3.client: Configured AWS service client
    """
    return session.client(service_name)


def create_ec2_client(session):
    """Create an EC2 boto3 client from the session."""
    return create_client("ec2", session)


def create_elbv2_client(session):
    """Create an Elastic Load Balancing v2 boto3 client from the session."""
    return create_client("elbv2", session)
