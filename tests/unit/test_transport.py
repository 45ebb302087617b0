"""
Tests for the requests-based transport.
"""

from unittest.mock import Mock

import requests

from konduto.client.transport.base import HttpRequest
from konduto.client.transport.http import RequestsTransport


def make_request(**overrides):
    params = {
        "method": "POST",
        "url": "https://api.konduto.test/v1/orders",
        "headers": {"Authorization": "Basic UDo="},
        "body": b'{"total": 100}',
        "options": {"timeout": 5, "verify": True},
    }
    params.update(overrides)
    return HttpRequest(**params)


class TestRequestsTransport:
    """Test RequestsTransport."""

    def test_send_passes_request_through(self):
        """Test method, url, headers, body and options reach the session."""
        session = Mock(spec=requests.Session)
        session.request.return_value = Mock(
            status_code=200, content=b'{"status": "ok"}', headers={"X-Id": "1"}
        )
        transport = RequestsTransport(session=session)

        response = transport.send(make_request())

        session.request.assert_called_once_with(
            "POST",
            "https://api.konduto.test/v1/orders",
            headers={"Authorization": "Basic UDo="},
            data=b'{"total": 100}',
            timeout=5,
            verify=True,
        )
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert response.error is None

    def test_error_statuses_are_not_interpreted(self):
        """Test 4xx/5xx come back as plain responses."""
        session = Mock(spec=requests.Session)
        session.request.return_value = Mock(status_code=500, content=b"", headers={})

        response = RequestsTransport(session=session).send(make_request())

        assert response.status_code == 500
        assert response.error is None

    def test_network_failure_is_captured(self):
        """Test request exceptions are returned, not raised."""
        session = Mock(spec=requests.Session)
        error = requests.Timeout("read timed out")
        session.request.side_effect = error

        response = RequestsTransport(session=session).send(make_request())

        assert response.error is error
        assert response.status_code == 0

    def test_close(self):
        """Test closing closes the session and refuses new requests."""
        session = Mock(spec=requests.Session)
        transport = RequestsTransport(session=session)

        transport.close()
        response = transport.send(make_request())

        session.close.assert_called_once()
        session.request.assert_not_called()
        assert response.error is not None
