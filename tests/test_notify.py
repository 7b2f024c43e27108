import base64

import httpx
import pytest

from brandaudit.config.schema import NotifyConfig, SubscribeConfig
from brandaudit.notify.benchmark import BenchmarkSubscriber, SubscribeError, split_name
from brandaudit.notify.resend import DEFAULT_FROM, NotifyError, ResendNotifier, build_email
from brandaudit.submission import Submission

SUBMISSION = Submission(
    name="Jane Q Doe",
    email="jane@example.com",
    company="Acme Corp",
    address="1 Main St",
    phone="555-1234",
    website="https://acme.com",
)


class FakeResponse:
    def __init__(self, payload=None, error: Exception | None = None, status_code: int = 200):
        self._payload = payload or {}
        self._error = error
        self.status_code = status_code
        self.text = str(self._payload)

    def raise_for_status(self) -> None:
        if self._error:
            raise self._error

    def json(self):
        return self._payload


def _stub_client(calls: dict, response: FakeResponse):
    class StubClient:
        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def post(self, url, json=None, headers=None, timeout=None):
            calls["url"] = url
            calls["json"] = json
            calls["headers"] = headers
            return response

    return StubClient


def test_build_email_attaches_report() -> None:
    payload = build_email(
        SUBMISSION, "<html>report</html>", sender=DEFAULT_FROM, recipient="sales@example.com"
    )

    assert payload["subject"] == "New Brand Audit Report: Acme Corp"
    assert payload["to"] == ["sales@example.com"]
    assert "<strong>Phone:</strong> 555-1234" in payload["html"]
    attachment = payload["attachments"][0]
    assert attachment["filename"] == "Acme Corp-brand-audit.html"
    assert base64.b64decode(attachment["content"]).decode("utf-8") == "<html>report</html>"


@pytest.mark.asyncio
async def test_resend_send_success(monkeypatch) -> None:
    calls: dict = {}
    monkeypatch.setattr(
        "brandaudit.notify.resend.httpx.AsyncClient",
        _stub_client(calls, FakeResponse({"id": "msg_1"})),
    )
    notifier = ResendNotifier(
        NotifyConfig(api_key="re_test_key_123", to_address="sales@example.com")
    )

    assert await notifier.send(SUBMISSION, "<html></html>") is True
    assert calls["url"] == "https://api.resend.com/emails"
    assert calls["headers"]["Authorization"] == "Bearer re_test_key_123"
    assert calls["json"]["from"] == DEFAULT_FROM


@pytest.mark.asyncio
async def test_resend_skips_when_not_configured(monkeypatch) -> None:
    monkeypatch.delenv("RESEND_API_KEY", raising=False)
    monkeypatch.delenv("NOTIFY_TO", raising=False)

    assert await ResendNotifier(NotifyConfig()).send(SUBMISSION, "") is False


@pytest.mark.asyncio
async def test_resend_env_fallback(monkeypatch) -> None:
    calls: dict = {}
    monkeypatch.setattr(
        "brandaudit.notify.resend.httpx.AsyncClient",
        _stub_client(calls, FakeResponse({"id": "msg_2"})),
    )
    monkeypatch.setenv("RESEND_API_KEY", "re_env_key_123")
    monkeypatch.setenv("NOTIFY_TO", "env-sales@example.com")
    monkeypatch.setenv("NOTIFY_FROM", "Audits <audits@example.com>")

    assert await ResendNotifier(NotifyConfig()).send(SUBMISSION, "") is True
    assert calls["json"]["to"] == ["env-sales@example.com"]
    assert calls["json"]["from"] == "Audits <audits@example.com>"


@pytest.mark.asyncio
async def test_resend_http_error_raises(monkeypatch) -> None:
    monkeypatch.setattr(
        "brandaudit.notify.resend.httpx.AsyncClient",
        _stub_client({}, FakeResponse(error=httpx.HTTPError("422 invalid"))),
    )
    notifier = ResendNotifier(NotifyConfig(api_key="re_key_abcdef", to_address="s@example.com"))

    with pytest.raises(NotifyError, match="resend request failed: 422 invalid"):
        await notifier.send(SUBMISSION, "")


def test_split_name() -> None:
    assert split_name("Jane Q Doe") == ("Jane", "Q Doe")
    assert split_name("  Cher ") == ("Cher", "")
    assert split_name("") == ("", "")


@pytest.mark.asyncio
async def test_benchmark_subscribe_success(monkeypatch) -> None:
    calls: dict = {}
    monkeypatch.setattr(
        "brandaudit.notify.benchmark.httpx.AsyncClient",
        _stub_client(calls, FakeResponse({"Response": {"Status": "1"}})),
    )
    subscriber = BenchmarkSubscriber(SubscribeConfig(auth_token="bm-token", list_id="42"))

    assert await subscriber.subscribe("Jane Q Doe", "jane@example.com") is True
    assert calls["url"] == "https://clientapi.benchmarkemail.com/Contact/42/ContactDetails"
    assert calls["headers"]["AuthToken"] == "bm-token"
    assert calls["json"] == {
        "Data": {
            "Email": "jane@example.com",
            "FirstName": "Jane",
            "LastName": "Q Doe",
            "EmailPerm": "1",
        }
    }


@pytest.mark.asyncio
async def test_benchmark_skips_without_list(monkeypatch) -> None:
    monkeypatch.delenv("BENCHMARK_LIST_ID", raising=False)
    subscriber = BenchmarkSubscriber(SubscribeConfig(auth_token="bm-token"))

    assert await subscriber.subscribe("Jane", "jane@example.com") is False


@pytest.mark.asyncio
async def test_benchmark_http_error_raises(monkeypatch) -> None:
    monkeypatch.setattr(
        "brandaudit.notify.benchmark.httpx.AsyncClient",
        _stub_client({}, FakeResponse(error=httpx.HTTPError("401 unauthorized"))),
    )
    subscriber = BenchmarkSubscriber(SubscribeConfig(auth_token="bad", list_id="42"))

    with pytest.raises(SubscribeError):
        await subscriber.subscribe("Jane", "jane@example.com")
