"""Print all attributes of an SQS queue."""

import sys

from aws_messaging.aws import SQSHelper
from aws_messaging.config import configure_logging
from aws_messaging.scripts import print_response


def main() -> int:
    sqs = SQSHelper()
    params = {
        "QueueUrl": "[YOUR_QUEUE_URL]",
        "AttributeNames": ["All"],
    }
    print_response(sqs.get_queue_attributes(params))
    return 0


def run() -> int:
    """Console script entry point."""
    configure_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run())
