"""Tests for the zero-argument entry point scripts."""

import json
from unittest.mock import Mock, patch

import pytest

from aws_messaging.scripts import (
    delete_message,
    get_queue_attributes,
    list_queues,
    publish_message,
    receive_message,
    send_message,
)


def _patch_helper(module, name):
    helper = Mock()
    patcher = patch.object(module, name, return_value=helper)
    return patcher, helper


class TestSQSScripts:
    """Each SQS script makes one helper call and prints the response."""

    @pytest.mark.parametrize(
        "module, method, expected_params",
        [
            (
                send_message,
                "send_message",
                {"QueueUrl": "[YOUR_QUEUE_URL]", "MessageBody": '{"message": "Hello AWS SQS!"}'},
            ),
            (
                receive_message,
                "receive_message",
                {"QueueUrl": "[YOUR_QUEUE_URL]", "MaxNumberOfMessages": 1},
            ),
            (
                delete_message,
                "delete_message",
                {"QueueUrl": "[YOUR_QUEUE_URL]", "ReceiptHandle": "[YOUR_RECEIPT_HANDLE]"},
            ),
            (
                get_queue_attributes,
                "get_queue_attributes",
                {"QueueUrl": "[YOUR_QUEUE_URL]", "AttributeNames": ["All"]},
            ),
        ],
    )
    def test_script_calls_helper_and_prints(self, capsys, module, method, expected_params):
        patcher, helper = _patch_helper(module, "SQSHelper")
        getattr(helper, method).return_value = {"ResponseMetadata": {"HTTPStatusCode": 200}}

        with patcher:
            exit_code = module.main()

        assert exit_code == 0
        getattr(helper, method).assert_called_once_with(expected_params)
        printed = json.loads(capsys.readouterr().out)
        assert printed == {"ResponseMetadata": {"HTTPStatusCode": 200}}

    def test_list_queues_script(self, capsys):
        patcher, helper = _patch_helper(list_queues, "SQSHelper")
        helper.list_queues.return_value = {"QueueUrls": ["https://sqs/q1"]}

        with patcher:
            assert list_queues.main() == 0

        helper.list_queues.assert_called_once_with()
        assert json.loads(capsys.readouterr().out) == {"QueueUrls": ["https://sqs/q1"]}

    def test_error_escapes_main(self, client_error):
        """SDK errors are not caught by the script."""
        patcher, helper = _patch_helper(delete_message, "SQSHelper")
        error = client_error("ReceiptHandleIsInvalid", "DeleteMessage")
        helper.delete_message.side_effect = error

        with patcher, pytest.raises(type(error)) as exc_info:
            delete_message.main()

        assert exc_info.value is error


class TestPublishScript:
    """Tests for the SNS publish script."""

    def test_publishes_json_structured_message(self, capsys):
        patcher, helper = _patch_helper(publish_message, "SNSHelper")
        helper.publish_message.return_value = {"MessageId": "sns-1"}

        with patcher:
            assert publish_message.main() == 0

        params = helper.publish_message.call_args.args[0]
        assert params["TopicArn"] == "[YOUR TOPIC ARN]"
        assert params["MessageStructure"] == "json"
        assert json.loads(params["Message"]) == {
            "default": "This is a test message",
            "sqs": "Hey! SQS, process this.",
            "sms": "ALERT: SQS has been notified about the message.",
        }
        assert json.loads(capsys.readouterr().out) == {"MessageId": "sns-1"}

    def test_datetimes_are_printed_as_strings(self, capsys):
        """Response datetimes from botocore do not break printing."""
        from datetime import datetime, timezone

        patcher, helper = _patch_helper(publish_message, "SNSHelper")
        helper.publish_message.return_value = {
            "MessageId": "sns-1",
            "Date": datetime(2024, 1, 1, tzinfo=timezone.utc),
        }

        with patcher:
            publish_message.main()

        printed = json.loads(capsys.readouterr().out)
        assert printed["Date"].startswith("2024-01-01")

    def test_run_configures_logging(self):
        patcher, helper = _patch_helper(publish_message, "SNSHelper")
        helper.publish_message.return_value = {}

        with patcher, patch.object(publish_message, "configure_logging") as configure:
            assert publish_message.run() == 0

        configure.assert_called_once_with()
