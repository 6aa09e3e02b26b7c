# File: tests/test_cli.py
"""Tests for the CLI using click.testing.CliRunner.
The engine coroutines are patched so nothing touches the network.
"""
import json

import pytest
from click.testing import CliRunner

import site_rag.cli as cli_module
from site_rag.cli import cli
from site_rag.config import Credentials
from site_rag.crawler.crawler import CrawlAborted, IngestReport
from site_rag.logger import init_logging
from site_rag.retrieval import Answer, AnswerStatus

REPORT = IngestReport(
    seed="https://example.com/",
    pages=["https://example.com/"],
    records=3,
    tree={"https://example.com/": []},
    duration=0.5,
)


@pytest.fixture()
def cfg_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("base_url: https://example.com\nchunk_size: 50\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def patch_engine(monkeypatch):
    """Patch engine entry points and credentials."""
    seen = {}

    async def fake_ingest(cfg, creds):
        seen["config"] = cfg
        return REPORT

    async def fake_ask(cfg, creds, question):
        seen["question"] = question
        return Answer(AnswerStatus.ANSWERED, "It is a web dev course.", sources=["https://example.com/cohort"])

    monkeypatch.setattr(cli_module, "ingest_site", fake_ingest)
    monkeypatch.setattr(cli_module, "ask_question", fake_ask)
    monkeypatch.setattr(cli_module, "load_credentials", lambda: Credentials(cohere_api_key="test"))
    yield seen
    # the CLI bound the log handler to the runner's stdout, which is closed now
    init_logging()


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "SiteRAG" in result.output


def test_show_config(cfg_file):
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["base_url"] == "https://example.com/"
    assert data["chunk_size"] == 50


def test_bad_config_exits_with_error(tmp_path):
    result = CliRunner().invoke(cli, ["--config", str(tmp_path / "missing.yaml"), "config"])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output


def test_ingest_summary(cfg_file):
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "ingest"])
    assert result.exit_code == 0
    assert "Ingested 1 page(s), 3 record(s)" in result.output


def test_ingest_limit_overrides_max_pages(cfg_file, patch_engine):
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "ingest", "--limit", "7"])
    assert result.exit_code == 0
    assert patch_engine["config"].max_pages == 7


def test_ingest_json_file(cfg_file, tmp_path):
    out = tmp_path / "out.json"
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "ingest", "--json", str(out)])
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8"))["records"] == 3


def test_ingest_failure(cfg_file, monkeypatch):
    async def broken(cfg, creds):
        raise CrawlAborted("https://example.com/x", 4)

    monkeypatch.setattr(cli_module, "ingest_site", broken)
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "ingest"])
    assert result.exit_code == 1
    assert "https://example.com/x" in result.output


def test_ask_prints_answer_and_sources(cfg_file, patch_engine):
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "ask", "what is cohort about?"])
    assert result.exit_code == 0
    assert patch_engine["question"] == "what is cohort about?"
    assert "It is a web dev course." in result.output
    assert "Sources: https://example.com/cohort" in result.output


@pytest.mark.parametrize(
    "status,code",
    [(AnswerStatus.NO_DATA, 0), (AnswerStatus.ERROR, 1)],
)
def test_ask_unanswered(cfg_file, monkeypatch, status, code):
    async def fake(cfg, creds, question):
        return Answer(status, "message for user")

    monkeypatch.setattr(cli_module, "ask_question", fake)
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "ask", "q"])
    assert result.exit_code == code
    assert "message for user" in result.output
