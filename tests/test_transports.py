import json
import unittest
from unittest.mock import patch, MagicMock
import os
import sys

import httpx
import openai
import requests

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_gen.clients import (
    FakeCompletionTransport,
    HttpCompletionTransport,
    OpenAICompletionTransport,
    get_completion_transport,
)
from event_gen.errors import TransportError
from event_gen.models import ChatMessage, CompletionRequest

COMPLETION_BODY = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-test",
    "choices": [
        {"index": 0, "message": {"role": "assistant", "content": '{"events":[]}'}, "finish_reason": "stop"}
    ],
    "usage": {"prompt_tokens": 3, "completion_tokens": 4, "total_tokens": 7},
}


def _request():
    return CompletionRequest(model="gpt-test", messages=[ChatMessage("user", "hi")], max_completion_tokens=10)


def _http_response(status_code, text="", reason="OK"):
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.text = text
    response.content = text.encode()
    response.json.side_effect = lambda: json.loads(text)
    return response


class TestHttpCompletionTransport(unittest.TestCase):

    def setUp(self):
        self.session = MagicMock()
        self.transport = HttpCompletionTransport(
            self.session, api_key="sk-test", base_url="https://api.example.com/v1/", timeout=(1, 2)
        )

    def test_success(self):
        self.session.post.return_value = _http_response(200, json.dumps(COMPLETION_BODY))

        result = self.transport.chat_completion(_request())

        self.assertTrue(result.is_successful)
        self.assertEqual(result.body.choices[0].message.content, '{"events":[]}')
        self.assertEqual(result.body.usage.total_tokens, 7)

        args, kwargs = self.session.post.call_args
        self.assertEqual(args[0], "https://api.example.com/v1/chat/completions")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer sk-test")
        self.assertEqual(kwargs["json"], _request().to_dict())
        self.assertEqual(kwargs["timeout"], (1, 2))

    def test_error_status_is_returned_not_raised(self):
        self.session.post.return_value = _http_response(500, "server exploded", reason="Internal Server Error")

        result = self.transport.chat_completion(_request())

        self.assertFalse(result.is_successful)
        self.assertEqual(result.status_code, 500)
        self.assertEqual(result.error_text, "server exploded")
        self.assertIsNone(result.body)

    def test_empty_body(self):
        self.session.post.return_value = _http_response(200, "")

        result = self.transport.chat_completion(_request())

        self.assertTrue(result.is_successful)
        self.assertIsNone(result.body)

    def test_undecodable_body(self):
        self.session.post.return_value = _http_response(200, "<html>gateway</html>")

        with self.assertRaises(TransportError) as ctx:
            self.transport.chat_completion(_request())
        self.assertEqual(ctx.exception.status_code, 200)

    def test_non_object_body(self):
        for text in ('["x"]', '"just text"', '42'):
            with self.subTest(body=text):
                self.session.post.return_value = _http_response(200, text)

                with self.assertRaises(TransportError) as ctx:
                    self.transport.chat_completion(_request())
                self.assertEqual(ctx.exception.status_code, 200)
                self.assertEqual(ctx.exception.body, text)

    def test_malformed_choices(self):
        body = dict(COMPLETION_BODY, choices=["not a choice"])
        self.session.post.return_value = _http_response(200, json.dumps(body))

        with self.assertRaises(TransportError):
            self.transport.chat_completion(_request())

    def test_null_body(self):
        self.session.post.return_value = _http_response(200, "null")

        result = self.transport.chat_completion(_request())

        self.assertIsNone(result.body)

    def test_timeout(self):
        self.session.post.side_effect = requests.Timeout("read timed out")

        with self.assertRaises(TransportError) as ctx:
            self.transport.chat_completion(_request())
        self.assertIn("timed out", str(ctx.exception))

    def test_connection_error(self):
        self.session.post.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(TransportError):
            self.transport.chat_completion(_request())


class TestOpenAICompletionTransport(unittest.TestCase):

    def setUp(self):
        self.client = MagicMock()
        self.transport = OpenAICompletionTransport(self.client)
        self.http_request = httpx.Request("POST", "https://api.example.com/v1/chat/completions")

    def test_success(self):
        completion = MagicMock()
        completion.model_dump.return_value = COMPLETION_BODY
        completion.model_dump_json.return_value = json.dumps(COMPLETION_BODY)
        self.client.chat.completions.create.return_value = completion

        result = self.transport.chat_completion(_request())

        self.client.chat.completions.create.assert_called_once_with(**_request().to_dict())
        self.assertEqual(result.status_code, 200)
        self.assertEqual(result.body.choices[0].finish_reason, "stop")

    def test_status_error(self):
        response = httpx.Response(500, text="server exploded", request=self.http_request)
        self.client.chat.completions.create.side_effect = openai.APIStatusError(
            "boom", response=response, body=None
        )

        result = self.transport.chat_completion(_request())

        self.assertEqual(result.status_code, 500)
        self.assertEqual(result.error_text, "server exploded")
        self.assertIsNone(result.body)

    def test_connection_error(self):
        self.client.chat.completions.create.side_effect = openai.APIConnectionError(request=self.http_request)

        with self.assertRaises(TransportError):
            self.transport.chat_completion(_request())


class TestFakeCompletionTransport(unittest.TestCase):

    def test_records_requests_and_returns_payload(self):
        transport = FakeCompletionTransport(content='{"events":[]}')

        result = transport.chat_completion(_request())

        self.assertEqual(transport.requests, [_request()])
        self.assertEqual(result.body.choices[0].message.content, '{"events":[]}')


class TestGetCompletionTransport(unittest.TestCase):

    def test_http(self):
        self.assertIsInstance(get_completion_transport("http"), HttpCompletionTransport)

    @patch('event_gen.clients.openai_client.get_openai')
    def test_sdk(self, mock_get_openai):
        mock_get_openai.return_value = MagicMock()
        self.assertIsInstance(get_completion_transport("SDK"), OpenAICompletionTransport)

    def test_fake(self):
        self.assertIsInstance(get_completion_transport("fake"), FakeCompletionTransport)

    def test_unknown(self):
        with self.assertRaises(ValueError):
            get_completion_transport("carrier-pigeon")


if __name__ == '__main__':
    unittest.main()
