"""Publish a multi-protocol message to an SNS topic."""

import json
import sys

from aws_messaging.aws import SNSHelper
from aws_messaging.config import configure_logging
from aws_messaging.scripts import print_response


def main() -> int:
    sns = SNSHelper()
    params = {
        "TopicArn": "[YOUR TOPIC ARN]",
        "MessageStructure": "json",
        # Per-protocol bodies; "default" is required with MessageStructure=json
        "Message": json.dumps(
            {
                "default": "This is a test message",
                "sqs": "Hey! SQS, process this.",
                "sms": "ALERT: SQS has been notified about the message.",
            }
        ),
    }
    print_response(sns.publish_message(params))
    return 0


def run() -> int:
    """Console script entry point."""
    configure_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run())
