import json

import pytest
from pydantic import ValidationError

from haci.errors import ParseError
from haci.models.network import Network


class TestNetwork:
    def test_ip_strips_prefix(self):
        assert Network(network="192.168.1.5/24").ip() == "192.168.1.5"

    def test_ip_ipv6(self):
        assert Network(network="2001:db8::10/128").ip() == "2001:db8::10"

    def test_ip_invalid_cidr(self):
        with pytest.raises(ParseError):
            Network(network="not-a-network").ip()

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Network(network="10.0.0.300/32").ip()

    def test_defaults(self):
        network = Network(network="10.0.0.1/32")
        assert network.id is None
        assert network.description == ""
        assert network.tags == ()

    def test_frozen(self):
        network = Network(network="10.0.0.1/32")
        with pytest.raises(ValidationError):
            network.description = "changed"

    def test_decode_remote_keys(self):
        payload = {
            "ID": "42",
            "createDate": "2024-01-01 12:00:00",
            "createFrom": "admin",
            "description": "web server",
            "network": "10.1.2.3/32",
            "tags": ["prod", "web"],
        }
        network = Network.model_validate_json(json.dumps(payload))

        assert network.id == "42"
        assert network.create_date == "2024-01-01 12:00:00"
        assert network.create_from == "admin"
        assert network.tags == ("prod", "web")

    def test_to_json_dict_uses_remote_keys(self):
        network = Network(id="1", network="10.0.0.1/32", description="db", tags=["a"])
        data = network.to_json_dict()

        assert set(data) == {"ID", "createDate", "createFrom", "description", "network", "tags"}
        assert data["ID"] == "1"
        assert data["network"] == "10.0.0.1/32"
        assert data["tags"] == ["a"]

    def test_tags_cannot_be_mutated(self):
        network = Network(network="10.0.0.1/32", tags=["office"])
        with pytest.raises(AttributeError):
            network.tags.append("x")
        assert network.tags == ("office",)

    def test_network_info_host_route(self):
        info = Network(network="10.0.0.5/32").network_info()
        assert info == {
            "address": "10.0.0.5",
            "network": "10.0.0.5/32",
            "version": 4,
            "prefix": 32,
            "size": 1,
            "host_route": True,
        }

    def test_network_info_keeps_host_address(self):
        info = Network(network="192.168.1.5/24").network_info()
        assert info["address"] == "192.168.1.5"
        assert info["network"] == "192.168.1.0/24"
        assert info["size"] == 256
        assert info["host_route"] is False

    def test_network_info_invalid(self):
        assert Network(network="bogus").network_info() is None
