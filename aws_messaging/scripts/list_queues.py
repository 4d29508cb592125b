"""List the SQS queues visible to the current credentials."""

import sys

from aws_messaging.aws import SQSHelper
from aws_messaging.config import configure_logging
from aws_messaging.scripts import print_response


def main() -> int:
    sqs = SQSHelper()
    print_response(sqs.list_queues())
    return 0


def run() -> int:
    """Console script entry point."""
    configure_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run())
