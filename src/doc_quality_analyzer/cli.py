from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Any, Dict, List

import typer
import yaml

from .config import STYLE_CHECK_CATALOG, Settings, load_config
from .models import AnalysisResult, Document
from .pipeline import analyze_documents
from .reporting import summarize_result
from .scoring import evaluate_quality_targets

logger = logging.getLogger(__name__)

app = typer.Typer(help="Documentation quality analyzer CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".md", ".markdown", ".txt"}


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    target_grade: float | None = typer.Option(
        None, "--target-grade", help="Override the target Flesch-Kincaid grade."
    ),
    max_sentence_length: int | None = typer.Option(
        None, "--max-sentence-length", help="Override the max words per sentence."
    ),
    enable_check: List[str] | None = typer.Option(
        None,
        "--enable-check",
        help="Style check to enable (repeatable); replaces the configured set.",
    ),
    full: bool = typer.Option(
        False, "--full", help="Emit the complete report instead of a summary."
    ),
    max_workers: int = typer.Option(
        1, "--max-workers", min=1, help="Documents analyzed in parallel."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Analyze markdown documents and emit a JSON report."""
    _configure_logging(verbose)
    settings = _apply_overrides(
        load_config(config), target_grade, max_sentence_length, enable_check
    )
    documents = _load_documents(input_path)
    results = analyze_documents(documents, settings, max_workers=max_workers)
    logger.info("Analyzed %d document(s)", len(results))
    typer.echo(json.dumps({"documents": _build_payload(results, full)}, indent=2))


@app.command("check-targets")
def check_targets(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Compare one document's scores with the configured quality targets."""
    settings = load_config(config)
    documents = _load_documents(input_path)
    results = analyze_documents(documents, settings)
    result = results[documents[0].doc_id]
    verdicts = evaluate_quality_targets(result, settings.quality_targets)
    for dimension, passed in verdicts.items():
        typer.echo(f"{dimension}: {'pass' if passed else 'FAIL'}")
    if not all(verdicts.values()):
        raise typer.Exit(code=1)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    typer.echo(yaml.safe_dump(Settings().to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _apply_overrides(
    settings: Settings,
    target_grade: float | None,
    max_sentence_length: int | None,
    enable_check: List[str] | None,
) -> Settings:
    """Return a copy of the settings with CLI overrides applied."""
    targets = settings.readability_targets
    if target_grade is not None:
        targets = dc_replace(targets, target_flesch_kincaid=target_grade)
    if max_sentence_length is not None:
        targets = dc_replace(targets, max_sentence_length=max_sentence_length)
    style = settings.style_guide
    if enable_check:
        unknown = [name for name in enable_check if name not in STYLE_CHECK_CATALOG]
        if unknown:
            raise typer.BadParameter(
                f"Unknown style check(s): {', '.join(unknown)}",
                param_hint="--enable-check",
            )
        style = dc_replace(style, enabled_checks=tuple(enable_check))
    return dc_replace(settings, readability_targets=targets, style_guide=style)


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents identified by relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    if not files:
        logger.warning("No supported documents found under %s", input_path)
    return [
        _document_from_file(file, str(file.relative_to(input_path))) for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text") from exc
    return Document(doc_id=doc_id, text=text)


def _build_payload(
    results: Dict[str, AnalysisResult], full: bool
) -> List[Dict[str, Any]]:
    payload: List[Dict[str, Any]] = []
    for doc_id, result in sorted(results.items()):
        if full:
            payload.append({"doc_id": doc_id, **result.to_dict()})
        else:
            payload.append(dict(summarize_result(doc_id, result)))
    return payload


if __name__ == "__main__":
    main()
