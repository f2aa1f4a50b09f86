"""Unit tests for network id probing."""

import json

import pytest
import requests
import responses

from tomo_networks.rpc import fetch_network_id, network_id_matches


class TestFetchNetworkId:
    """Test the fetch_network_id function."""

    @responses.activate
    def test_returns_numeric_id_as_int(self):
        """Test that a decimal net_version is returned as int."""
        responses.add(
            responses.POST,
            "http://test-rpc.example.com",
            json={"jsonrpc": "2.0", "id": 1, "result": "88"},
            status=200,
        )

        assert fetch_network_id("http://test-rpc.example.com") == 88

    @responses.activate
    def test_returns_non_numeric_id_as_str(self):
        """Test that a non-decimal net_version is returned unchanged."""
        responses.add(
            responses.POST,
            "http://test-rpc.example.com",
            json={"jsonrpc": "2.0", "id": 1, "result": "tomo-dev"},
            status=200,
        )

        assert fetch_network_id("http://test-rpc.example.com") == "tomo-dev"

    @responses.activate
    def test_sends_net_version_request(self):
        """Test the JSON-RPC payload sent to the node."""
        responses.add(
            responses.POST,
            "http://test-rpc.example.com",
            json={"jsonrpc": "2.0", "id": 1, "result": "89"},
            status=200,
        )

        fetch_network_id("http://test-rpc.example.com")

        assert len(responses.calls) == 1
        payload = json.loads(responses.calls[0].request.body)
        assert payload["method"] == "net_version"
        assert payload["params"] == []
        assert payload["jsonrpc"] == "2.0"

    @responses.activate
    def test_http_error_raises_runtime_error(self):
        """Test that non-200 status raises RuntimeError."""
        responses.add(responses.POST, "http://test-rpc.example.com", status=502)

        with pytest.raises(RuntimeError, match="502"):
            fetch_network_id("http://test-rpc.example.com")

    @responses.activate
    def test_rpc_error_raises_value_error(self):
        """Test that a JSON-RPC error raises ValueError."""
        responses.add(
            responses.POST,
            "http://test-rpc.example.com",
            json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "not found"}},
            status=200,
        )

        with pytest.raises(ValueError, match="RPC error"):
            fetch_network_id("http://test-rpc.example.com")

    @responses.activate
    def test_connection_error_raises_runtime_error(self):
        """Test that transport failures raise RuntimeError."""
        responses.add(
            responses.POST,
            "http://test-rpc.example.com",
            body=requests.ConnectionError("refused"),
        )

        with pytest.raises(RuntimeError, match="Network error"):
            fetch_network_id("http://test-rpc.example.com")

    @responses.activate
    def test_missing_result_raises_key_error(self):
        """Test that a response without result raises KeyError."""
        responses.add(
            responses.POST,
            "http://test-rpc.example.com",
            json={"jsonrpc": "2.0", "id": 1},
            status=200,
        )

        with pytest.raises(KeyError):
            fetch_network_id("http://test-rpc.example.com")


class TestNetworkIdMatches:
    """Test the network_id_matches function."""

    @pytest.mark.parametrize("actual", [1, 88, "5777", "anything"])
    def test_wildcard_matches_anything(self, actual):
        """Test that '*' accepts any reported id."""
        assert network_id_matches("*", actual)

    def test_int_matches_str(self):
        """Test that ids compare across int and str."""
        assert network_id_matches(88, "88")
        assert network_id_matches("89", 89)

    def test_different_ids_do_not_match(self):
        """Test that different ids are rejected."""
        assert not network_id_matches(88, 89)
        assert not network_id_matches("88", "880")


class TestFetchNetworkIdNonAscii:
    """Test network ids made of non-ASCII digit characters."""

    @pytest.mark.parametrize("reported", ["²", "٨٨"])
    @responses.activate
    def test_returned_as_str(self, reported):
        """Test that only ASCII decimal ids are converted to int."""
        responses.add(
            responses.POST,
            "http://test-rpc.example.com",
            json={"jsonrpc": "2.0", "id": 1, "result": reported},
            status=200,
        )

        assert fetch_network_id("http://test-rpc.example.com") == reported
