"""Parsing of ``PATTERN=REPLACEMENT`` command-line pairs."""

import click


def parse_mapping_pairs(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, str]:
    """Click callback turning repeated ``-m PATTERN=REPLACEMENT`` into a dict.

    Only the first ``=`` separates pattern from replacement, so replacements
    may contain ``=`` and may be empty (``-m foo=`` deletes ``foo``). Unlike
    logger levels, pairs are never split on whitespace or commas because both
    are meaningful in patterns. Later pairs override earlier ones.

    Raises:
        click.BadParameter: If a pair has no ``=`` or an empty pattern.
    """
    pairs: dict[str, str] = {}
    for item in value:
        pattern, sep, replacement = item.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected PATTERN=REPLACEMENT, got {item!r}")
        if not pattern:
            raise click.BadParameter(f"Empty pattern in {item!r}")
        pairs[pattern] = replacement
    return pairs
