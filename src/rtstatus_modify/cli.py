"""rtstatus modify - change the download path of already loaded torrents."""
from __future__ import annotations

from pathlib import Path

import click

from rtstatus_core.protocol import DEFAULT_KEY
from rtstatus_modify.batch import BatchError, modify_directory
from rtstatus_modify.report import write_report
from rtstatus_modify.reporting import EchoReporter


def _non_empty(ctx, param, value: str) -> str:
    if not value:
        raise click.BadParameter("must not be empty")
    return value


@click.command()
@click.argument("input_path", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("search_string", callback=_non_empty)
@click.argument("replace_string")
@click.option("-v", "--verbose", is_flag=True, help="Show all infos")
@click.option(
    "-o",
    "--output-path",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Copy files to this directory and modify the copies, leaving INPUT_PATH untouched",
)
@click.option("-k", "--keyword", default=DEFAULT_KEY, show_default=True, callback=_non_empty,
              help="Field key to search and replace in")
@click.option("--keep-going", is_flag=True, help="Record failing files and continue instead of stopping")
@click.option("--report", "report_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write a parquet report of every processed file")
def main(
    input_path: Path,
    search_string: str,
    replace_string: str,
    verbose: bool,
    output_path: Path | None,
    keyword: str,
    keep_going: bool,
    report_path: Path | None,
) -> None:
    """Replace SEARCH_STRING with REPLACE_STRING in the stored path of rtorrent status files."""
    reporter = EchoReporter(verbose)
    reporter.info("Start replacing files ...")
    try:
        summary = modify_directory(
            input_path,
            search_string,
            replace_string,
            key=keyword,
            output_dir=output_path,
            fail_fast=not keep_going,
            reporter=reporter,
        )
    except (BatchError, OSError) as e:
        # Fail closed with a single-line reason.
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)

    if report_path is not None and write_report(summary.outcomes, report_path):
        reporter.info(f"Report written to {report_path}")

    if summary.failed:
        click.echo(f"FATAL: {len(summary.failed)} file(s) failed", err=True)
        raise SystemExit(1)

    reporter.info(f"File modification completed successfully ({len(summary.modified)} modified)")


if __name__ == "__main__":
    main()
