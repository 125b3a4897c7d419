import json
from pathlib import Path

from typer.testing import CliRunner

from doc_quality_analyzer.cli import app
from tests.utils import write_corpus

runner = CliRunner()


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """analyze lists every markdown and text document under a directory."""
    corpus_dir = write_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["README.md", "guides/notes.txt"]
    readme = payload["documents"][0]
    assert readme["scores"]["structure"] == 100
    assert readme["total_links"] == 2
    assert 0 <= readme["overall_score"] <= 100


def test_cli_analyze_full_report(tmp_path: Path):
    """--full emits the complete per-document result as JSON."""
    corpus_dir = write_corpus(tmp_path)
    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(corpus_dir / "README.md"), "--full"],
    )
    assert result.exit_code == 0
    (document,) = json.loads(result.stdout)["documents"]
    assert document["doc_id"] == "README.md"
    assert "structure_analysis" in document
    assert document["link_validation"]["total_links"] == 2


def test_cli_analyze_uses_config_file(tmp_path: Path):
    """Settings from --config change what analyze reports."""
    corpus_dir = write_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("style_guide:\n  enabled_checks: []\n", encoding="utf-8")
    notes = corpus_dir / "guides" / "notes.txt"
    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(notes), "--config", str(config_path), "--full"],
    )
    assert result.exit_code == 0
    (document,) = json.loads(result.stdout)["documents"]
    assert document["style_compliance"]["issues"] == []


def test_cli_enable_check_override(tmp_path: Path):
    """--enable-check replaces the configured style checks."""
    corpus_dir = write_corpus(tmp_path)
    notes = corpus_dir / "guides" / "notes.txt"
    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(notes), "--enable-check", "click-here", "--full"],
    )
    assert result.exit_code == 0
    (document,) = json.loads(result.stdout)["documents"]
    assert [i["type"] for i in document["style_compliance"]["issues"]] == ["formatting"]


def test_cli_rejects_unknown_check(tmp_path: Path):
    """Check names outside the catalog are a usage error."""
    corpus_dir = write_corpus(tmp_path)
    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(corpus_dir), "--enable-check", "spelling"],
    )
    assert result.exit_code != 0


def test_cli_check_targets(tmp_path: Path):
    """check-targets exits non-zero when a document misses a target."""
    corpus_dir = write_corpus(tmp_path)
    passing = runner.invoke(
        app, ["check-targets", "--input-path", str(corpus_dir / "README.md")]
    )
    assert passing.exit_code == 0
    assert "structure: pass" in passing.stdout

    failing = runner.invoke(
        app,
        ["check-targets", "--input-path", str(corpus_dir / "guides" / "notes.txt")],
    )
    assert failing.exit_code == 1
    assert "structure: FAIL" in failing.stdout


def test_cli_print_config():
    """print-config dumps the default settings."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "readability_targets" in result.stdout
    assert "max_sentence_length: 20" in result.stdout
