"""Tests for eks_cost_toolkit/common/aws_client_factory.py"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from eks_cost_toolkit.common.aws_client_factory import (
    create_client,
    create_ec2_client,
    create_elbv2_client,
    create_session,
)
from tests.assertions import assert_equal


@patch("boto3.Session")
def test_create_session_uses_profile_and_region(mock_session_cls):
    """Test create_session binds the profile and region."""
    mock_session_cls.return_value = MagicMock()

    session = create_session("demo-profile", "eu-west-2")

    mock_session_cls.assert_called_once_with(profile_name="demo-profile", region_name="eu-west-2")
    assert_equal(session, mock_session_cls.return_value)


def test_create_client_delegates_to_session():
    """Test create_client asks the session for the named service."""
    session = MagicMock()

    client = create_client("sts", session)

    session.client.assert_called_once_with("sts")
    assert_equal(client, session.client.return_value)


def test_create_ec2_client():
    """Test create_ec2_client creates an ec2 client."""
    session = MagicMock()

    create_ec2_client(session)

    session.client.assert_called_once_with("ec2")


def test_create_elbv2_client():
    """Test create_elbv2_client creates an elbv2 client."""
    session = MagicMock()

    create_elbv2_client(session)

    session.client.assert_called_once_with("elbv2")


def test_stubbed_session_keeps_region():
    """Test the autouse boto3 stub records the requested region."""
    session = create_session("demo-profile", "us-east-1")

    assert_equal(session.region_name, "us-east-1")
    assert_equal(create_ec2_client(session).service_name, "ec2")
