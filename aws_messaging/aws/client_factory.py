"""Boto3 client factory.

If AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY are set, use them;
otherwise use the default boto3 credential provider (SSO, role, etc.).
"""

import os
from typing import Any

import boto3

from aws_messaging.config import settings


def get_boto3_client_kwargs() -> dict[str, Any]:
    """Return kwargs for boto3.client() so that explicit settings are used only when set.

    Region and endpoint are passed only when configured; otherwise boto3
    resolves them itself (AWS_REGION, AWS_DEFAULT_REGION, profile config).
    Explicit keys are passed only when both AWS_ACCESS_KEY_ID and
    AWS_SECRET_ACCESS_KEY are present, together with AWS_SESSION_TOKEN
    when that is set too.

    Returns:
        Dict of keyword arguments, possibly empty.
    """
    kwargs: dict[str, Any] = {}
    if settings.aws.region:
        kwargs["region_name"] = settings.aws.region
    if settings.aws.endpoint_url:
        kwargs["endpoint_url"] = settings.aws.endpoint_url

    access_key = os.environ.get("AWS_ACCESS_KEY_ID", "").strip()
    secret_key = os.environ.get("AWS_SECRET_ACCESS_KEY", "").strip()
    if access_key and secret_key:
        kwargs["aws_access_key_id"] = access_key
        kwargs["aws_secret_access_key"] = secret_key
        session_token = os.environ.get("AWS_SESSION_TOKEN", "").strip()
        if session_token:
            kwargs["aws_session_token"] = session_token
    return kwargs


def create_client(service: str) -> Any:
    """Create a boto3 low-level client for the given service."""
    return boto3.client(service, **get_boto3_client_kwargs())
