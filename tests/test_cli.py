import json
from unittest.mock import AsyncMock

from brandaudit import cli
from brandaudit.audit.models import AuditReport, QuerySpec
from brandaudit.audit.runner import AuditError, build_section
from brandaudit.search.models import SearchResult
from brandaudit.service import AuditOutcome

ARGS = [
    "--name", "Jane Doe",
    "--email", "jane@example.com",
    "--company", "Acme Corp",
    "--address", "1 Main St",
    "--phone", "555-1234",
    "--website", "https://acme.com",
]


def test_cli_reports_missing_fields(tmp_path, capsys) -> None:
    code = cli.main(["--config", str(tmp_path / "none.json"), "--name", "Jane"])

    err = capsys.readouterr().err
    assert code == 1
    assert "Email is required." in err
    assert "Website URL is required." in err


def test_cli_prints_generic_failure(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli.AuditService, "submit", AsyncMock(side_effect=AuditError()))

    code = cli.main([*ARGS, "--config", str(tmp_path / "none.json")])

    assert code == 1
    assert cli.FAILURE_MESSAGE in capsys.readouterr().err


def test_cli_writes_html(tmp_path, monkeypatch, capsys) -> None:
    report = AuditReport(business_name="Acme Corp", official_site="https://acme.com")
    submit = AsyncMock(return_value=AuditOutcome(report=report, notified=True, subscribed=True))
    monkeypatch.setattr(cli.AuditService, "submit", submit)
    out_path = tmp_path / "out" / "report.html"

    code = cli.main(
        [*ARGS, "--config", str(tmp_path / "none.json"), "--html", str(out_path), "--no-notify"]
    )

    assert code == 0
    assert out_path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")
    assert submit.await_args.kwargs == {"notify": False, "subscribe": True}
    out = capsys.readouterr().out
    assert "Brand control audit for Acme Corp" in out
    assert "subscribed" in out


def test_cli_writes_json(tmp_path, monkeypatch) -> None:
    section = build_section(
        QuerySpec("Company Name Search", "Acme Corp"),
        [
            SearchResult("Acme Corp", "https://www.acme.com/", "Home"),
            SearchResult("Acme Corp | Yelp", "https://www.yelp.com/biz/acme", ""),
        ],
        "Acme Corp",
        "https://acme.com",
    )
    report = AuditReport(
        business_name="Acme Corp", official_site="https://acme.com", sections=(section,)
    )
    monkeypatch.setattr(
        cli.AuditService,
        "submit",
        AsyncMock(return_value=AuditOutcome(report=report, notified=True, subscribed=False)),
    )
    out_path = tmp_path / "report.json"

    code = cli.main([*ARGS, "--config", str(tmp_path / "none.json"), "--json", str(out_path)])

    assert code == 0
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["notified"] is True
    assert data["subscribed"] is False
    assert data["submission"]["company"] == "Acme Corp"
    assert data["report"]["businessName"] == "Acme Corp"
    written = data["report"]["sections"][0]
    assert written["label"] == "Company Name Search"
    assert [r["controlType"] for r in written["results"]] == ["FullControl", "PartialControl"]
    assert written["counts"]["FullControl"] == 1
    assert written["percentages"]["PartialControl"] == 50
    assert written["percentages"]["MissedOpportunity"] == 0
