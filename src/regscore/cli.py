"""Typer CLI entry points for the regscore pipeline."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from .config import PipelineConfig, build_config, load_config
from .exceptions import RegScoreError
from .exporter import summarize
from .io_utils import write_jsonl
from .loader import clean_corpus, read_corpus
from .pipeline import run_pipeline
from .synth_data import generate_corpus, write_default_wordlists

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_CHOICES = [
    "TRACE",
    "DEBUG",
    "INFO",
    "SUCCESS",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

app = typer.Typer(help="regscore pipeline CLI.")


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        enqueue=False,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level:<8}</level> | {message}",
    )


def _resolve_config(config_path: Optional[Path], **overrides: object) -> PipelineConfig:
    if config_path is not None:
        return load_config(config_path, **overrides)
    return build_config(**overrides)


def _fail(stage: str, exc: RegScoreError) -> typer.Exit:
    logger.error("{}:failed | {}", stage, exc)
    return typer.Exit(code=1)


@app.callback()
def main(
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        help=f"Log verbosity ({', '.join(LOG_LEVEL_CHOICES)}).",
        case_sensitive=False,
    ),
) -> None:
    if log_level.upper() not in LOG_LEVEL_CHOICES:
        raise typer.BadParameter(f"Unsupported log level '{log_level}'.", param_hint="--log-level")
    configure_logging(log_level)


@app.command("analyze")
def analyze_cli(
    corpus: Optional[Path] = typer.Option(
        None, "--corpus", "-i", resolve_path=True, help="Input corpus (.csv, .jsonl or .json)."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", resolve_path=True, help="Destination table (.csv or .jsonl)."
    ),
    wordlists: Optional[Path] = typer.Option(
        None, "--wordlists", "-w", resolve_path=True, help="Directory containing the word list CSVs."
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", exists=True, readable=True, resolve_path=True, help="JSON config file."
    ),
    min_words: Optional[int] = typer.Option(None, "--min-words", min=0, help="Minimum word count to keep."),
    filter_short: Optional[bool] = typer.Option(
        None, "--filter-short/--no-filter-short", help="Toggle the minimum word-count filter."
    ),
    reference_date: Optional[str] = typer.Option(
        None, "--reference-date", help="As-of date for age calculation (YYYY-MM-DD)."
    ),
    match_mode: Optional[str] = typer.Option(
        None, "--match-mode", "-m", help="Phrase matching: 'substring', 'word' or 'regex'."
    ),
    save_matrices: Optional[bool] = typer.Option(
        None, "--save-matrices/--no-save-matrices", help="Write per-phrase matrices next to the output."
    ),
    summary: bool = typer.Option(False, "--summary", help="Print corpus-level statistics."),
) -> None:
    """Score the corpus and write the analysis table."""
    try:
        config = _resolve_config(
            config_path,
            corpus_path=corpus,
            output_path=output,
            wordlist_dir=wordlists,
            min_wordcount=min_words,
            filter_short=filter_short,
            reference_date=reference_date,
            match_mode=match_mode.lower() if match_mode else None,
            save_matrices=save_matrices,
        )
        frame = run_pipeline(config)
    except RegScoreError as exc:
        raise _fail("analyze", exc) from exc

    if summary:
        typer.echo(summarize(frame).to_string())
    typer.echo(f"Wrote {len(frame)} scored regulations to {config.output_path}")


@app.command("clean")
def clean_cli(
    corpus: Path = typer.Option(
        ..., "--corpus", "-i", exists=True, readable=True, resolve_path=True, help="Input corpus."
    ),
    output: Path = typer.Option(
        ..., "--output", "-o", resolve_path=True, help="Destination JSONL for the cleaned corpus."
    ),
    min_words: Optional[int] = typer.Option(None, "--min-words", min=0, help="Minimum word count to keep."),
    filter_short: Optional[bool] = typer.Option(
        None, "--filter-short/--no-filter-short", help="Toggle the minimum word-count filter."
    ),
) -> None:
    """Filter and normalise the corpus without scoring it."""
    try:
        config = build_config(corpus_path=corpus, min_wordcount=min_words, filter_short=filter_short)
        documents = clean_corpus(read_corpus(config.corpus_path), config)
    except RegScoreError as exc:
        raise _fail("clean", exc) from exc

    write_jsonl(output, (document.to_record() for document in documents))
    typer.echo(f"Wrote {len(documents)} cleaned regulations to {output}")


@app.command("synth-data")
def synth_data_cli(
    count: int = typer.Option(50, "--count", "-n", min=0, help="Number of regulations to generate."),
    seed: int = typer.Option(13, "--seed", help="Seed for deterministic generation."),
    output: Path = typer.Option(
        Path("regulations_data.jsonl"),
        "--output",
        "-o",
        dir_okay=False,
        resolve_path=True,
        help="Destination JSONL file.",
    ),
    wordlists: Optional[Path] = typer.Option(
        None, "--wordlists", "-w", file_okay=False, resolve_path=True, help="Also write starter word lists here."
    ),
) -> None:
    """Generate a synthetic regulation corpus."""
    generate_corpus(output_path=output, count=count, seed=seed)
    typer.echo(f"Wrote {count} regulations to {output}")
    if wordlists is not None:
        written = write_default_wordlists(wordlists)
        typer.echo(f"Wrote {len(written)} word lists to {wordlists}")


def run() -> None:
    """Entrypoint when invoking via `python -m`."""
    app()


if __name__ == "__main__":
    run()
