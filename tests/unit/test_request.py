"""
Tests for building HTTP requests from operations.
"""

import base64
import json

import pytest

from konduto.client.exceptions import ConfigurationError
from konduto.client.request import Operation, basic_authorization, build_request
from konduto.core.state import ConfigState

ENDPOINT = "https://api.konduto.test/v1"


class TestOperation:
    """Test URL resolution."""

    def test_post_has_no_id(self):
        """Test POST never appends an id."""
        op = Operation("POST", body={"total": 100}, resource_id="42")

        assert op.resolve_uri(ENDPOINT) == f"{ENDPOINT}/orders"

    @pytest.mark.parametrize("method", ["GET", "PUT", "get", "put"])
    def test_get_and_put_append_id(self, method):
        """Test GET and PUT address a single order."""
        op = Operation(method, resource_id="42")

        assert op.resolve_uri(ENDPOINT) == f"{ENDPOINT}/orders/42"

    def test_trailing_slash_endpoint(self):
        """Test a trailing slash on the endpoint is ignored."""
        assert Operation("POST").resolve_uri(ENDPOINT + "/") == f"{ENDPOINT}/orders"


class TestBasicAuthorization:
    """Test authorization header encoding."""

    def test_key_is_username_without_password(self):
        """Test the key is encoded as 'key:'."""
        header = basic_authorization("PabcXYZ")

        assert header.startswith("Basic ")
        assert base64.b64decode(header[6:]) == b"PabcXYZ:"


class TestBuildRequest:
    """Test build_request."""

    def test_requires_api_key(self):
        """Test building without a key raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            build_request(Operation("GET", resource_id="1"), ConfigState().snapshot(), ENDPOINT)

    def test_post_with_body(self, state):
        """Test body encoding and headers."""
        request = build_request(Operation("POST", body={"total": 100}), state.snapshot(), ENDPOINT)

        assert request.method == "POST"
        assert request.url == f"{ENDPOINT}/orders"
        assert json.loads(request.body) == {"total": 100}
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Authorization"] == basic_authorization("PabcXYZ")

    def test_get_without_body(self, state):
        """Test requests without a body have no content type."""
        request = build_request(Operation("get", resource_id="7"), state.snapshot(), ENDPOINT)

        assert request.method == "GET"
        assert request.body is None
        assert "Content-Type" not in request.headers

    def test_tls_flag_becomes_verify(self):
        """Test TLS mode maps to certificate verification."""
        state = ConfigState()
        state.set_api_key("Tsandbox")

        request = build_request(Operation("POST", body={}), state.snapshot(), ENDPOINT)

        assert request.options["verify"] is False

    def test_options_merge(self, state):
        """Test extra options are merged under required ones."""
        state.set_transport_options({"timeout": 3, "allow_redirects": False})

        request = build_request(
            Operation("POST", body={}), state.snapshot(), ENDPOINT, default_timeout=30
        )

        assert request.options == {"timeout": 3, "allow_redirects": False, "verify": True}

    def test_default_timeout(self, state):
        """Test the default timeout applies when none is configured."""
        request = build_request(
            Operation("POST", body={}), state.snapshot(), ENDPOINT, default_timeout=12.5
        )

        assert request.options["timeout"] == 12.5
