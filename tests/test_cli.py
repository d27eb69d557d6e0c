"""Tests for the gateway-notice CLI."""

from urllib.parse import parse_qs, urlsplit

from click.testing import CliRunner

from gateway_notice.cli import main


def _config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_ticket_link_prints_url(tmp_path):
    config = _config(tmp_path, "ticket_url: https://tickets.example.net/create\n")
    runner = CliRunner()

    result = runner.invoke(
        main,
        ["--config", config, "ticket-link", "cf_rule_id=qqq", "cf_site_uri=https://evil.test"],
    )

    assert result.exit_code == 0, result.output
    link = result.output.strip()
    assert link.startswith("https://tickets.example.net/create?pid=12345")
    assert "evil[.]test" in parse_qs(urlsplit(link).query)["summary"][0]


def test_ticket_link_base_url_option(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["--config", str(tmp_path / "none.yaml"), "ticket-link", "--base-url", "https://t.example/new"],
    )
    assert result.exit_code == 0
    assert result.output.startswith("https://t.example/new?pid=12345")


def test_ticket_link_rejects_bad_base_url(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["--config", str(tmp_path / "none.yaml"), "ticket-link", "--base-url", "nope"],
    )
    assert result.exit_code != 0
    assert "not an absolute URL" in result.output


def test_inspect_excluded(tmp_path):
    config = _config(tmp_path, "exclusions: zzz\n")
    runner = CliRunner()

    result = runner.invoke(main, ["--config", config, "inspect", "cf_rule_id=zzz"])

    assert result.exit_code == 0, result.output
    assert "excluded" in result.output
    assert "No actions are available for this block." in result.output


def test_inspect_allowlisted(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "--config", str(tmp_path / "none.yaml"),
            "inspect", "cf_rule_id=4-5-6", "cf_site_uri=https://bad.example.com",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "allowlisted" in result.output
    assert "View in Radar" in result.output


def test_inspect_rejects_malformed_pair(tmp_path):
    runner = CliRunner()
    result = runner.invoke(main, ["--config", str(tmp_path / "none.yaml"), "inspect", "oops"])
    assert result.exit_code == 2
    assert "KEY=VALUE" in result.output
