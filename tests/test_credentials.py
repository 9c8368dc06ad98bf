"""Tests for xMatters authentication strategies."""

import httpx
import pytest

from uptime_notify.errors import HttpStatusError, InvalidResponseError, TransportError
from uptime_notify.providers.credentials import (
    ApiKeyCredentials,
    BasicCredentials,
    OAuthCredentials,
    credentials_from_config,
    request_oauth_token,
)
from uptime_notify.schemas.notification import XMattersConfig
from uptime_notify.transport import OutboundRequest

from tests.conftest import XMATTERS_URL, RecordingTransport, form_body


def _config(**fields) -> XMattersConfig:
    return XMattersConfig(xMattersUrl=XMATTERS_URL, **fields)


def _request() -> OutboundRequest:
    return OutboundRequest(
        method="POST", url=XMATTERS_URL, headers={"Content-Type": "application/json"}
    )


class TestCredentialsFromConfig:
    def test_basic(self):
        creds = credentials_from_config(
            _config(
                xMattersAuthenticationMethod="basic",
                xMattersUsername="alice",
                xMattersPassword="s3cret",
            )
        )
        assert creds == BasicCredentials("alice", "s3cret")

    def test_api_key(self):
        creds = credentials_from_config(
            _config(
                xMattersAuthenticationMethod="apiKey",
                xMattersApiKey="key-1",
                xMattersSecret="shh",
            )
        )
        assert creds == ApiKeyCredentials("key-1", "shh")

    def test_oauth(self):
        creds = credentials_from_config(
            _config(
                xMattersAuthenticationMethod="oauth",
                xMattersClientId="client-9",
                xMattersUsername="bob",
                xMattersPassword="pw",
            )
        )
        assert creds == OAuthCredentials("client-9", "bob", "pw")

    def test_no_method_means_no_credentials(self):
        assert credentials_from_config(_config()) is None

    def test_unknown_method_rejected_by_config(self):
        with pytest.raises(ValueError):
            _config(xMattersAuthenticationMethod="kerberos")


class TestStaticCredentials:
    @pytest.mark.asyncio
    async def test_basic_sets_auth_pair_without_header(self):
        request = _request()
        async with httpx.AsyncClient() as client:
            await BasicCredentials("alice", "s3cret").apply(request, client)
        assert request.auth == ("alice", "s3cret")
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_api_key_uses_basic_auth_transport(self):
        request = _request()
        async with httpx.AsyncClient() as client:
            await ApiKeyCredentials("key-1", "shh").apply(request, client)
        assert request.auth == ("key-1", "shh")
        assert "Authorization" not in request.headers


class TestOAuth:
    @pytest.mark.asyncio
    async def test_token_exchange_request(self):
        transport = RecordingTransport(
            lambda request: httpx.Response(200, json={"access_token": "T"})
        )
        async with transport.client_factory() as client:
            token = await request_oauth_token(
                client, "acme.xmatters.com", "client-9", "bob", "pw"
            )

        assert token == "T"
        sent = transport.last
        assert sent.method == "POST"
        assert str(sent.url) == "https://acme.xmatters.com/api/xm/1/oauth2/token"
        assert sent.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert form_body(sent) == {
            "grant_type": "password",
            "client_id": "client-9",
            "username": "bob",
            "password": "pw",
        }

    @pytest.mark.asyncio
    async def test_apply_sets_bearer_header_from_endpoint_host(self):
        transport = RecordingTransport(
            lambda request: httpx.Response(200, json={"access_token": "T"})
        )
        request = _request()
        async with transport.client_factory() as client:
            await OAuthCredentials("client-9", "bob", "pw").apply(request, client)

        assert request.headers["Authorization"] == "Bearer T"
        assert request.auth is None
        assert transport.last.url.host == "acme.xmatters.com"

    @pytest.mark.asyncio
    async def test_token_exchange_failure_status(self):
        transport = RecordingTransport(lambda request: httpx.Response(401))
        async with transport.client_factory() as client:
            with pytest.raises(HttpStatusError) as exc_info:
                await request_oauth_token(client, "acme.xmatters.com", "c", "u", "p")
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_token_missing_from_response(self):
        transport = RecordingTransport(lambda request: httpx.Response(200, json={}))
        async with transport.client_factory() as client:
            with pytest.raises(InvalidResponseError):
                await request_oauth_token(client, "acme.xmatters.com", "c", "u", "p")

    @pytest.mark.asyncio
    async def test_non_json_token_response(self):
        transport = RecordingTransport(lambda request: httpx.Response(200, text="<html>"))
        async with transport.client_factory() as client:
            with pytest.raises(InvalidResponseError):
                await request_oauth_token(client, "acme.xmatters.com", "c", "u", "p")

    @pytest.mark.asyncio
    async def test_schemeless_endpoint_sends_no_token_request(self):
        transport = RecordingTransport(
            lambda request: httpx.Response(200, json={"access_token": "T"})
        )
        request = OutboundRequest(
            method="POST", url="acme.xmatters.com/api/integration/1/functions/abc/triggers"
        )
        async with transport.client_factory() as client:
            with pytest.raises(TransportError, match="Cannot derive xMatters host"):
                await OAuthCredentials("c", "bob", "pw").apply(request, client)

        assert transport.requests == []
        assert "Authorization" not in request.headers
