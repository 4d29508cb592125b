"""Send a JSON message to an SQS queue."""

import json
import sys

from aws_messaging.aws import SQSHelper
from aws_messaging.config import configure_logging
from aws_messaging.scripts import print_response


def main() -> int:
    sqs = SQSHelper()
    params = {
        "QueueUrl": "[YOUR_QUEUE_URL]",
        "MessageBody": json.dumps({"message": "Hello AWS SQS!"}),
    }
    print_response(sqs.send_message(params))
    return 0


def run() -> int:
    """Console script entry point."""
    configure_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run())
