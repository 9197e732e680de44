import json
import unittest
from unittest.mock import MagicMock
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_gen.clients.fake_client import FakeCompletionTransport
from event_gen.errors import (
    BlankContentError,
    EmptyResponseError,
    MalformedPayloadError,
    MissingEventsFieldError,
    NoChoicesError,
    TransportError,
)
from event_gen.models import (
    ChatMessage,
    Choice,
    CompletionResponse,
    GenerationQuery,
    TransportResponse,
    Usage,
)
from event_gen.models.completion import FINISH_CONTENT_FILTER, FINISH_ERROR, FINISH_LENGTH
from event_gen.prompt import EVENT_SCHEMA
from event_gen.services.generator import EventGenerator
from helpers import make_event_dict, make_profile


def _transport_returning(response):
    transport = MagicMock()
    transport.chat_completion.return_value = response
    return transport


def _body(content, finish_reason="stop", usage=None):
    return CompletionResponse(
        id="cmpl-1",
        created=0,
        model="gpt-test",
        choices=[Choice(index=0, message=ChatMessage(role="assistant", content=content), finish_reason=finish_reason)],
        usage=usage,
    )


class TestEventGenerator(unittest.TestCase):

    def setUp(self):
        self.query = GenerationQuery(profile=make_profile())

    def test_happy_path_with_fake_transport(self):
        transport = FakeCompletionTransport()
        generator = EventGenerator(transport, model="gpt-test")

        events = generator.generate_events(self.query)

        self.assertEqual(len(events), 1)
        self.assertEqual(events[0].title, "Fake Rock Concert")
        self.assertEqual(len(transport.requests), 1)

    def test_request_contents(self):
        transport = FakeCompletionTransport()
        generator = EventGenerator(transport, model="gpt-test", max_completion_tokens=321)

        generator.generate(self.query)

        request = transport.requests[0]
        self.assertEqual(request.model, "gpt-test")
        self.assertEqual(request.max_completion_tokens, 321)
        self.assertIsNone(request.temperature)
        self.assertEqual([m.role for m in request.messages], ["system", "user"])
        self.assertEqual(json.loads(request.messages[1].content)["user"]["uid"], "u1")

        payload = request.to_dict()
        self.assertNotIn("temperature", payload)
        self.assertEqual(payload["response_format"], {"type": "json_schema", "json_schema": EVENT_SCHEMA})

    def test_non_success_status(self):
        generator = EventGenerator(_transport_returning(TransportResponse(500, error_text="server exploded")))

        with self.assertRaises(TransportError) as ctx:
            generator.generate(self.query)

        self.assertIn("500", str(ctx.exception))
        self.assertIn("server exploded", str(ctx.exception))
        self.assertEqual(ctx.exception.status_code, 500)

    def test_missing_body(self):
        generator = EventGenerator(_transport_returning(TransportResponse(200, body=None)))
        with self.assertRaises(EmptyResponseError):
            generator.generate(self.query)

    def test_no_choices(self):
        body = CompletionResponse(id="cmpl-1", created=0, model="gpt-test", choices=[])
        generator = EventGenerator(_transport_returning(TransportResponse(200, body=body)))
        with self.assertRaises(NoChoicesError):
            generator.generate(self.query)

    def test_blank_content_reports_finish_reason_and_usage(self):
        usage = Usage(prompt_tokens=812, completion_tokens=1500, total_tokens=2312)
        body = _body("   ", finish_reason=FINISH_LENGTH, usage=usage)
        generator = EventGenerator(_transport_returning(TransportResponse(200, body=body)))

        with self.assertRaises(BlankContentError) as ctx:
            generator.generate(self.query)

        message = str(ctx.exception)
        self.assertIn("finish_reason=length", message)
        self.assertIn("prompt_tokens=812", message)
        self.assertIn("completion_tokens=1500", message)
        self.assertIn("total_tokens=2312", message)

    def test_early_stop_is_logged(self):
        for reason in (FINISH_LENGTH, FINISH_CONTENT_FILTER, FINISH_ERROR):
            with self.subTest(finish_reason=reason):
                generator = EventGenerator(FakeCompletionTransport(content='{"events": []}', finish_reason=reason))

                with self.assertLogs("event_gen.services.generator", level="WARNING") as logs:
                    generator.generate(self.query)

                self.assertIn(f"finish_reason={reason}", "\n".join(logs.output))

    def test_truncated_reply_is_malformed(self):
        content = json.dumps({"events": [make_event_dict(), make_event_dict()]})[:-40]
        generator = EventGenerator(FakeCompletionTransport(content=content, finish_reason=FINISH_LENGTH))

        with self.assertRaises(MalformedPayloadError):
            generator.generate(self.query)

    def test_missing_events_field_propagates(self):
        generator = EventGenerator(FakeCompletionTransport(content='{"foo":"bar"}'))
        with self.assertRaises(MissingEventsFieldError):
            generator.generate_events(self.query)

    def test_prose_reply_is_malformed(self):
        generator = EventGenerator(FakeCompletionTransport(content="I cannot do that."))
        with self.assertRaises(MalformedPayloadError):
            generator.generate(self.query)

    def test_generate_keeps_failures_generate_events_drops_them(self):
        content = json.dumps({"events": [make_event_dict(), make_event_dict(title="")]})
        generator = EventGenerator(FakeCompletionTransport(content=content))

        outcome = generator.generate(self.query)
        self.assertEqual(len(outcome.events), 1)
        self.assertEqual(len(outcome.failures), 1)

        with self.assertLogs("event_gen.services.generator", level="WARNING"):
            events = generator.generate_events(self.query)
        self.assertEqual(len(events), 1)

    def test_transport_exception_propagates(self):
        transport = MagicMock()
        transport.chat_completion.side_effect = TransportError("OpenAI request timed out")
        generator = EventGenerator(transport)

        with self.assertRaises(TransportError):
            generator.generate(self.query)


if __name__ == '__main__':
    unittest.main()
