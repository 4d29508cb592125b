"""AWS SQS helper for queue operations.

Every method forwards the caller's request dict to the matching boto3 call
and returns the raw response. Batching, polling and visibility handling are
left to the caller and to SQS itself.
"""

from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError
from structlog import get_logger

from aws_messaging.aws.client_factory import create_client

logger = get_logger(__name__)


class SQSHelper:
    """Forwards queue requests to a single long-lived SQS client."""

    def __init__(self, client: Optional[Any] = None):
        """Initialize SQS helper.

        Args:
            client: Pre-built boto3 SQS client. A new one is created when omitted.
        """
        self.sqs_client = client if client is not None else create_client("sqs")

    def _call(self, operation: str, method: str, params: dict[str, Any]) -> dict[str, Any]:
        logger.debug("Calling SQS", operation=operation, queue_url=params.get("QueueUrl"))
        try:
            return getattr(self.sqs_client, method)(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "SQS request failed",
                operation=operation,
                queue_url=params.get("QueueUrl"),
                error=str(e),
            )
            raise

    def list_queues(self, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """List queues in the account and region.

        Args:
            params: Optional request, e.g. QueueNamePrefix, MaxResults

        Returns:
            Raw response with QueueUrls when any exist
        """
        return self._call("ListQueues", "list_queues", params if params is not None else {})

    def get_queue_attributes(self, params: dict[str, Any]) -> dict[str, Any]:
        """Get queue attributes (QueueUrl, AttributeNames)."""
        return self._call("GetQueueAttributes", "get_queue_attributes", params)

    def send_message(self, params: dict[str, Any]) -> dict[str, Any]:
        """Send a message (QueueUrl, MessageBody, ...)."""
        return self._call("SendMessage", "send_message", params)

    def receive_message(self, params: dict[str, Any]) -> dict[str, Any]:
        """Receive messages (QueueUrl, MaxNumberOfMessages, ...)."""
        return self._call("ReceiveMessage", "receive_message", params)

    def delete_message(self, params: dict[str, Any]) -> dict[str, Any]:
        """Delete a message (QueueUrl, ReceiptHandle)."""
        return self._call("DeleteMessage", "delete_message", params)
