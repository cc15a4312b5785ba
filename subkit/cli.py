"""
Command-line entry point for the subkit helpers.

Usage:
    subkit parse "00:01:02,500 --> 00:01:04,000"
    subkit format 62.5 --digits 3 --separator ,
    subkit words "你好world"
    subkit escape "a.b*c"
    subkit shift movie.srt --offset -1.25 -o fixed.srt
"""

import json
import math
import sys
import uuid

import click

from subkit.config import get_settings
from subkit.utils.logging_utils import setup_logger, get_request_logger
from subkit.utils.platform_utils import get_version
from subkit.utils.text_utils import split_printing_words, escape_regexp, normalize_newlines
from subkit.utils.timestamp_utils import TIMECODE_PATTERN, parse_timestamp, format_timestamp, shift_timestamps

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


@click.group(context_settings=CONTEXT_SETTINGS,
    help="Timecode and subtitle text helpers")
@click.version_option(
    get_version(),
    "-v", "--version",
    prog_name="subkit"
)
@click.pass_context
def cli(ctx):
    settings = get_settings()
    base_logger = setup_logger(log_level=settings.log_level, logger_name=settings.app_name)
    ctx.obj = get_request_logger(f"cli-{uuid.uuid4().hex[:8]}", base_logger)


@cli.command(help="Print the seconds value of the first timecode in TEXT")
@click.argument("text")
def parse(text):
    seconds = parse_timestamp(text)
    if seconds is None:
        click.echo(f"No timecode found in: {text}", err=True)
        sys.exit(1)
    click.echo(repr(seconds))


@cli.command(name="format", help="Format SECONDS as a timecode")
@click.argument("seconds", type=click.FloatRange(min=0))
@click.option("--digits", "-d", default=None,
    help="fractional digits [default: FRACTION_DIGITS]",
    type=click.IntRange(0, 9))
@click.option("--separator", "-s", default=None,
    help="separator before the fraction [default: FRACTION_SEPARATOR]",
    type=click.Choice([".", ","]))
def format_seconds(seconds, digits, separator):
    settings = get_settings()
    click.echo(format_timestamp(
        seconds,
        settings.fraction_digits if digits is None else digits,
        separator or settings.fraction_separator
    ))


@cli.command(help="Split TEXT into printing words (JSON list)")
@click.argument("text")
def words(text):
    click.echo(json.dumps(split_printing_words(normalize_newlines(text)), ensure_ascii=False))


@cli.command(help="Escape regex metacharacters in TEXT")
@click.argument("text")
def escape(text):
    click.echo(escape_regexp(text))


def check_finite(ctx, param, value):
    if not math.isfinite(value):
        raise click.BadParameter("must be a finite number of seconds")
    return value


@cli.command(help="Shift every timecode in a subtitle FILE by --offset seconds")
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.option("--offset", "-t", required=True,
    help="seconds to add (negative moves earlier)",
    type=float, callback=check_finite)
@click.option("--output", "-o", default="-",
    help="output file",
    type=click.File("w", encoding="utf-8"), show_default=True)
@click.pass_obj
def shift(logger, file, offset, output):
    content = normalize_newlines(file.read())
    count = len(TIMECODE_PATTERN.findall(content))
    output.write(shift_timestamps(content, offset))
    logger.info(f"Shifted {count} timecodes by {offset:+.3f}s")


def main():
    cli()


if __name__ == "__main__":
    main()
