"""
Request Composer Unit Tests
"""

from urllib.parse import parse_qsl

import pytest

from nexmo_rest.builders import (
    build_get_balance,
    build_get_pricing,
    build_search_messages_by_ids,
    build_send_message,
    build_tts_message,
    build_update_settings,
)
from nexmo_rest.client.composer import RequestComposer, encode_params
from nexmo_rest.config import NexmoConfig
from nexmo_rest.models import HttpMethod


class TestRequestComposer:
    """Tests for RequestComposer"""

    @pytest.fixture
    def composer(self, config: NexmoConfig) -> RequestComposer:
        return RequestComposer(config)

    def test_credentials_lead(self, composer: RequestComposer):
        """Should put api_key and api_secret before the operation fields"""
        request = composer.compose(build_get_pricing("GB"))
        assert request.params == "api_key=key123&api_secret=secret45&country=GB"

    def test_balance_carries_only_credentials(self, composer: RequestComposer):
        request = composer.compose(build_get_balance())
        assert request.method is HttpMethod.GET
        assert request.url == (
            "https://rest.nexmo.com:443/account/get-balance"
            "?api_key=key123&api_secret=secret45"
        )
        assert request.body is None

    def test_post_uses_body(self, composer: RequestComposer):
        request = composer.compose(
            build_send_message({"from": "Acme", "to": "447700900000", "type": "text", "text": "hi there"})
        )
        assert request.method is HttpMethod.POST
        assert request.url == "https://rest.nexmo.com:443/sms/json"
        assert parse_qsl(request.body.decode("utf-8")) == [
            ("api_key", "key123"),
            ("api_secret", "secret45"),
            ("from", "Acme"),
            ("to", "447700900000"),
            ("type", "text"),
            ("text", "hi there"),
        ]

    def test_plain_http(self):
        composer = RequestComposer(NexmoConfig(api_key="k", api_secret="s", use_tls=False))
        request = composer.compose(build_get_balance())
        assert request.base_url == "http://rest.nexmo.com:80/account/get-balance"

    def test_custom_host(self):
        composer = RequestComposer(
            NexmoConfig(api_key="k", api_secret="s", base_url="rest-sandbox.nexmo.com")
        )
        request = composer.compose(build_get_balance())
        assert request.host == "rest-sandbox.nexmo.com"

    def test_tts_uses_voice_host(self, composer: RequestComposer):
        """Should route text-to-speech to the voice host"""
        request = composer.compose(build_tts_message({"to": "447700900000", "text": "hello"}))
        assert request.base_url == "https://api.nexmo.com:443/tts/json"

    def test_url_fields_round_trip(self, composer: RequestComposer):
        """Should encode URL values exactly once"""
        url = "https://example.com/mo?a=1&b=two words"
        request = composer.compose(build_update_settings({"moCallBackUrl": url}))
        assert dict(parse_qsl(request.params))["moCallBackUrl"] == url

    def test_wap_push_url_round_trip(self, composer: RequestComposer):
        url = "http://a.com/?x=1&y=2"
        request = composer.compose(
            build_send_message({"from": "A", "to": "1", "type": "wappush", "title": "t", "url": url})
        )
        assert dict(parse_qsl(request.params))["url"] == url

    def test_repeated_ids(self, composer: RequestComposer):
        request = composer.compose(build_search_messages_by_ids(["a", "b", "c"]))
        assert [v for k, v in parse_qsl(request.params) if k == "ids"] == ["a", "b", "c"]

    def test_log_params_redacted(self, composer: RequestComposer):
        """Should keep the secret out of the loggable parameters"""
        request = composer.compose(build_update_settings({"newSecret": "abc123"}))
        assert "secret45" not in request.log_params
        assert "abc123" not in request.log_params
        assert "api_key=key123" in request.log_params


class TestEncodeParams:
    """Tests for form encoding"""

    def test_reserved_characters(self):
        assert encode_params([("text", "a&b=c")]) == "text=a%26b%3Dc"

    def test_unicode(self):
        assert encode_params([("text", "héllo")]) == "text=h%C3%A9llo"

    def test_preencoded_values_kept(self):
        assert encode_params([("url", "a%2Fb")], encoded={"url"}) == "url=a%2Fb"

    def test_empty(self):
        assert encode_params([]) == ""
