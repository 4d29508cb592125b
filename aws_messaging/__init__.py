"""Thin boto3 helpers and scripts for SNS and SQS operations."""

__version__ = "0.1.0"
