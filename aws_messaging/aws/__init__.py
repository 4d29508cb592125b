"""AWS services package."""

from aws_messaging.aws.client_factory import create_client, get_boto3_client_kwargs
from aws_messaging.aws.sns_helper import SNSHelper
from aws_messaging.aws.sqs_helper import SQSHelper

__all__ = [
    "SNSHelper",
    "SQSHelper",
    "create_client",
    "get_boto3_client_kwargs",
]
