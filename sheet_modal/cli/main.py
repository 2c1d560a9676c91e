from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd
from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, SheetConfig, load_config
from ..logging.init import log_summary, setup_logging
from ..models.load_result import LoadResult
from ..services.loader import SheetLoader
from ..services.presenter import ModalPresenter
from ..services.repository import ProductRepository
from ..services.summary import render_summary_line
from .console_view import ConsoleModalView

"""CLI entrypoint.

Flow:
- Load ``.env`` (``SHEETS_CSV_URL`` overrides the configured URL) and the config
- Fetch the sheet (or read ``--file``) and build the product table
- Print the SUMMARY line
- Optionally preview the table (``--inspect-data``) or render the modal for
  one or more keys (``--show``)
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_LOAD_FAILED = 2

INSPECT_ROWS = 5

logger = logging.getLogger(__name__)


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env, letting its values win over the existing environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Load a product sheet and preview the product modal")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to the YAML config")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--file", type=Path, help="Read CSV from a local file instead of the configured URL")
    p.add_argument("--inspect-data", action="store_true", help="Print sheet headers & first rows then exit")
    p.add_argument(
        "--show",
        action="append",
        default=[],
        metavar="KEY",
        help="Render the modal for KEY (repeatable)",
    )
    return p.parse_args(argv)


def _inspect_data(repository: ProductRepository) -> None:
    table = repository.snapshot()
    if not table:
        print("inspect: no records")
        return
    df = pd.DataFrame.from_dict(dict(table), orient="index")
    print(f"inspect: records={len(df)} columns={list(df.columns)}")
    print(df.head(INSPECT_ROWS).to_string())


def _show(cfg: SheetConfig, repository: ProductRepository, keys: list[str]) -> None:
    view = ConsoleModalView()
    presenter = ModalPresenter(
        repository,
        view,
        description_fallback=cfg.description_fallback,
        placeholder=cfg.placeholder,
    )
    presenter.attach_cards(cfg.cards)
    for key in keys:
        presenter.open_for_key(key)
        presenter.on_key("Escape")
    presenter.detach()


def _run_load(cfg: SheetConfig, repository: ProductRepository, file: Path | None) -> LoadResult:
    loader = SheetLoader(repository, cfg.csv_url, timeout=cfg.request_timeout)
    if file is None:
        return loader.load()
    loader.url = str(file)
    try:
        text = file.read_text(encoding="utf-8-sig")
    except OSError as e:
        text = ""
        logger.warning(f"cannot read {file}: {e}")
    return loader.load_text(text)


def main(argv: list[str] | None = None) -> int:
    # Empty argv from tests must not fall back to sys.argv.
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    logger.debug("debug mode enabled")

    _load_env_file(Path(".env"), override=True)
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    repository = ProductRepository()
    source = args.file if args.file is not None else cfg.csv_url
    logger.info(f"Loading sheet from: {source}")
    result = _run_load(cfg, repository, args.file)

    # log_summary adds the "SUMMARY " label itself
    log_summary(render_summary_line(result)[len("SUMMARY "):])

    if args.inspect_data:
        _inspect_data(repository)
        return EXIT_SUCCESS if result.ok else EXIT_LOAD_FAILED

    if args.show:
        _show(cfg, repository, args.show)

    return EXIT_SUCCESS if result.ok else EXIT_LOAD_FAILED
