"""AWS SNS helper for topic publishing."""

from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError
from structlog import get_logger

from aws_messaging.aws.client_factory import create_client

logger = get_logger(__name__)


class SNSHelper:
    """Forwards publish requests to a single long-lived SNS client."""

    def __init__(self, client: Optional[Any] = None):
        """Initialize SNS helper.

        Args:
            client: Pre-built boto3 SNS client. A new one is created when omitted.
        """
        self.sns_client = client if client is not None else create_client("sns")

    def publish_message(self, params: dict[str, Any]) -> dict[str, Any]:
        """Publish a message to an SNS topic.

        Args:
            params: Publish request, e.g. TopicArn, Message, MessageStructure

        Returns:
            Raw response from SNS
        """
        logger.debug("Publishing SNS message", operation="Publish")
        try:
            return self.sns_client.publish(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Failed to publish SNS message",
                operation="Publish",
                topic_arn=params.get("TopicArn"),
                error=str(e),
            )
            raise
