"""stringkit text commands: ``replace`` and ``find``.

Both commands build a replacer from the same sources:

- a JSON mapping file given with ``--mapping-file``, or named by the
  ``STRINGKIT_MAPPING_FILE`` environment variable when the option is absent;
- any number of ``-m PATTERN=REPLACEMENT`` pairs, which override file entries.

Input text comes from the TEXT argument or from ``--input`` (``-`` reads stdin),
never both. Files are read as UTF-8 bytes so line endings pass through
unchanged. Results go to **stdout**; notices go to **stderr** so output can be
piped.

Failure modes
- Unreadable or malformed mapping file → ``ClickException`` naming the file.
- Malformed ``-m`` pair → ``BadParameter``.
- Neither or both of TEXT and ``--input`` → ``UsageError``.
- ``--input`` bytes that are not UTF-8 → ``ClickException``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import click

from stringkit import config
from stringkit.adapters.replacer import new_replacer

from .helpers import error, parse_mapping_pairs, success, warn

if TYPE_CHECKING:
    from collections.abc import Callable

    from stringkit.interfaces.replacer import Replacer

logger = logging.getLogger(__name__)

EMPTY_MAPPING_WARNING = "No patterns given; text is passed through unchanged."
MISSING_INPUT_MSG = "Provide TEXT or --input FILE (use '-' for stdin)."
BOTH_INPUTS_MSG = "Give either TEXT or --input, not both."
MAPPING_ERROR_MSG = "Cannot load mapping file."


def _mapping_options(func: Callable) -> Callable:
    """Attach the mapping and input options shared by every text command."""
    func = click.argument("text", required=False)(func)
    func = click.option(
        "--input",
        "input_file",
        type=click.File("rb"),
        help="Read the text from FILE instead of the TEXT argument ('-' for stdin).",
    )(func)
    func = click.option(
        "--mapping-file",
        type=click.Path(dir_okay=False, path_type=Path),
        help=(
            "JSON object of PATTERN: REPLACEMENT pairs. "
            f"Defaults to ${config.MAPPING_FILE_ENV} when set."
        ),
    )(func)
    func = click.option(
        "-m",
        "--map",
        "pairs",
        multiple=True,
        callback=parse_mapping_pairs,
        help="PATTERN=REPLACEMENT pair; repeatable, overrides the mapping file.",
    )(func)
    return func


def _resolve_mapping_path(mapping_file: Path | None) -> Path | None:
    if mapping_file is not None:
        return mapping_file
    try:
        return config.get_mapping_path()
    except config.MappingFileNotSetError:
        return None


def _build_replacer(mapping_file: Path | None, pairs: dict[str, str]) -> Replacer:
    mapping: dict[str, str] = {}
    if (path := _resolve_mapping_path(mapping_file)) is not None:
        try:
            mapping.update(config.load_mapping(path))
        except config.InvalidMappingError as e:
            error(MAPPING_ERROR_MSG)
            raise click.ClickException(str(e)) from e
        logger.info("Loaded %d pattern(s) from %s", len(mapping), path)
    mapping.update(pairs)

    if not any(mapping):
        warn(EMPTY_MAPPING_WARNING)
    logger.debug("Building replacer for %d pattern(s)", len(mapping))
    return new_replacer(mapping)


def _read_text(text: str | None, input_file: BinaryIO | None) -> str:
    if text is not None and input_file is not None:
        raise click.UsageError(BOTH_INPUTS_MSG)
    if text is not None:
        return text
    if input_file is None:
        raise click.UsageError(MISSING_INPUT_MSG)
    try:
        return input_file.read().decode("utf-8")
    except UnicodeDecodeError as e:
        name = getattr(input_file, "name", "-")
        raise click.ClickException(
            f"Input '{name}' is not valid UTF-8 (byte {e.start})"
        ) from e


@click.command()
@_mapping_options
@click.option(
    "--newline/--no-newline",
    default=False,
    show_default=True,
    help="Terminate the output with a newline.",
)
def replace(
    text: str | None,
    input_file: BinaryIO | None,
    mapping_file: Path | None,
    pairs: dict[str, str],
    newline: bool,
) -> None:
    """Replace every pattern occurrence in TEXT and print the result."""
    replacer = _build_replacer(mapping_file, pairs)
    result = replacer.replace(_read_text(text, input_file))
    # Bytes bypass text-mode newline translation on stdout.
    click.echo(result.encode("utf-8"), nl=newline)


@click.command()
@_mapping_options
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the matches as a JSON list of {start, stop, match} objects.",
)
def find(
    text: str | None,
    input_file: BinaryIO | None,
    mapping_file: Path | None,
    pairs: dict[str, str],
    as_json: bool,
) -> None:
    """List the matches in TEXT that a replacement pass would rewrite.

    Each line holds START, STOP and the matched text separated by tabs.
    Positions are character offsets; STOP is exclusive.
    """
    replacer = _build_replacer(mapping_file, pairs)
    source = _read_text(text, input_file)
    spans = replacer.find(source)

    if as_json:
        records = [
            {"start": s.start, "stop": s.stop, "match": source[s.start : s.stop]}
            for s in spans
        ]
        click.echo(json.dumps(records, ensure_ascii=False))
    else:
        for s in spans:
            click.echo(f"{s.start}\t{s.stop}\t{source[s.start : s.stop]}")
    success(f"{len(spans)} match(es) found.")
