from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

import typer

from .browser.classifier import Classifier
from .config import IndexConfig, load_config
from .indexer.indexer import SiteIndexer
from .site.reader import SiteReader

app = typer.Typer(add_completion=False, no_args_is_help=True)

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """Select and extract the searchable files of a static site."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def _cfg(config: str) -> IndexConfig:
    try:
        return load_config(config)
    except FileNotFoundError as e:
        raise typer.BadParameter(f"Config file not found: {config}") from e
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

@app.command()
def init(source: str = typer.Option(..., help="Site source directory"),
         out: str = typer.Option("sitefinder.toml", help="Write example config to this path")):
    """Write a starter sitefinder.toml."""
    outp = Path(out)
    outp.write_text(f"""[site]
source = "{source}"
# timezone = "America/New_York"
collections = []
paginate_path = "/page:num/"

[index]
# Comma-separated; replaces the default html/markdown extensions when set
# extensions_to_index = "html,md"
files_to_exclude = ["index.html", "index.md"]
workers = 4
fail_fast = false
""", encoding="utf-8")
    typer.echo(f"Wrote {outp}")

@app.command()
def extract(config: str = typer.Option("sitefinder.toml"),
            workers: int = typer.Option(None, help="Override index.workers"),
            fail_fast: bool = typer.Option(None, help="Abort on the first failing file")):
    """Print the records of every indexable file as JSON."""
    cfg = _cfg(config)
    if workers is not None:
        cfg = dataclasses.replace(cfg, workers=workers)
    if fail_fast is not None:
        cfg = dataclasses.replace(cfg, fail_fast=fail_fast)

    result = SiteIndexer(cfg).run()
    typer.echo(json.dumps([r.to_dict() for r in result.records], indent=2, default=str))

    stats = result.stats
    typer.echo(
        f"{stats.files_indexed} indexed, {stats.files_skipped} skipped, "
        f"{stats.files_failed} failed in {stats.elapsed_seconds:.1f}s",
        err=True,
    )
    if stats.files_failed:
        raise typer.Exit(code=1)

@app.command()
def check(path: str, config: str = typer.Option("sitefinder.toml")):
    """Explain whether one site-relative path would be indexed."""
    cfg = _cfg(config)
    if not (cfg.source / path).is_file():
        raise typer.BadParameter(f"No such file in {cfg.source}: {path}")
    record = SiteReader(cfg).read_file(path)
    if record is None:
        typer.echo(f"{path}: not published by the site")
        raise typer.Exit(code=1)

    reasons = Classifier(cfg).reasons(record)
    if reasons:
        typer.echo(f"{path}: skipped ({reasons[0]})")
    else:
        typer.echo(f"{path}: indexable as {record.url}")

if __name__ == "__main__":
    app()
