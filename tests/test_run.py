"""Tests for the run.py launcher."""

from unittest import mock

import requests
import responses

import run

URL = "http://localhost:8501"


class TestOpenWhenReady:
    @responses.activate
    def test_opens_browser_once_server_answers(self):
        responses.add(responses.GET, URL, body=requests.ConnectionError("down"))
        responses.add(responses.GET, URL, body="ok", status=200)
        with mock.patch.object(run.webbrowser, "open") as open_browser, \
             mock.patch.object(run.time, "sleep"):
            assert run.open_when_ready(URL) is True
        open_browser.assert_called_once_with(URL)
        assert len(responses.calls) == 2

    @responses.activate
    def test_gives_up_after_timeout(self):
        responses.add(responses.GET, URL, status=503)
        with mock.patch.object(run.webbrowser, "open") as open_browser, \
             mock.patch.object(run.time, "sleep"), \
             mock.patch.object(run.time, "monotonic", side_effect=[0, 0, 100]):
            assert run.open_when_ready(URL, timeout=30) is False
        open_browser.assert_not_called()
        assert len(responses.calls) == 1
