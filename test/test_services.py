#!/usr/bin/env python3
import unittest
from unittest.mock import Mock, patch

import requests

from update_monitor.exceptions import SendError
from update_monitor.services import send_slack_payload

SLACK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


class TestSendSlackPayload(unittest.TestCase):
    @patch('update_monitor.services.requests.post')
    def test_posts_json(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text='ok')
        resp = send_slack_payload(SLACK_URL, {'blocks': []}, timeout=None)
        mock_post.assert_called_once_with(SLACK_URL, json={'blocks': []}, timeout=None)
        self.assertIs(resp, mock_post.return_value)

    @patch('update_monitor.services.requests.post')
    def test_timeout_is_forwarded(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text='ok')
        send_slack_payload(SLACK_URL, {'blocks': []}, timeout=2.5)
        self.assertEqual(mock_post.call_args.kwargs['timeout'], 2.5)

    @patch('update_monitor.services.requests.post')
    def test_transport_error(self, mock_post):
        mock_post.side_effect = requests.Timeout("timed out")
        with self.assertRaises(SendError):
            send_slack_payload(SLACK_URL, {'blocks': []})
        self.assertEqual(mock_post.call_count, 1)

    @patch('update_monitor.services.requests.post')
    def test_error_status(self, mock_post):
        mock_post.return_value = Mock(status_code=404, text='no_service')
        with self.assertRaises(SendError) as ctx:
            send_slack_payload(SLACK_URL, {'blocks': []})
        self.assertEqual(ctx.exception.status_code, 404)


if __name__ == '__main__':
    unittest.main()
