import unittest
from unittest.mock import patch
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from click.testing import CliRunner

from fixtures import PNG_BYTES, VALID_FIELDS

from dev_events.cli import cli


def publish_args(*extra):
    args = ["publish"]
    for name, value in VALID_FIELDS.items():
        args += [f"--{name}", value]
    args += ["--tag", "nextjs", "--tag", "react", "--agenda", "09:00 - Keynote"]
    return args + list(extra)


class TestPublishCommand(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()

    @patch('dev_events.clients.api_client.EventsApiClient.create_event')
    def test_publish_prints_created_slug(self, mock_create_event):
        mock_create_event.return_value = (201, {"status": "created", "slug": "nextjs-conf-2026"})

        with self.runner.isolated_filesystem():
            with open("poster.png", "wb") as fh:
                fh.write(PNG_BYTES)
            result = self.runner.invoke(cli, publish_args("--image", "poster.png"))

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("nextjs-conf-2026", result.output)
        fields, files = mock_create_event.call_args[0]
        self.assertEqual(fields["tags"], '["nextjs", "react"]')
        self.assertEqual(files["image"][0], "poster.png")
        self.assertEqual(files["image"][2], "image/png")

    @patch('dev_events.clients.api_client.EventsApiClient.create_event')
    def test_publish_without_image_fails_locally(self, mock_create_event):
        result = self.runner.invoke(cli, publish_args())

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Please upload an event image", result.output)
        mock_create_event.assert_not_called()


if __name__ == '__main__':
    unittest.main()
