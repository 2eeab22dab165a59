import json
from pathlib import Path
import click
from rtstatus_core.protocol import DEFAULT_KEY
from .logic import verify_directory, verify_file

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

def _non_empty(ctx, param, value: str) -> str:
    if not value:
        raise click.BadParameter("must not be empty")
    return value

@click.group()
def main():
    pass

@main.command("file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-k", "--keyword", default=DEFAULT_KEY, show_default=True, callback=_non_empty)
def file_cmd(path: Path, keyword: str):
    result = verify_file(path, keyword)
    click.echo(json.dumps(result, **CANONICAL_JSON_KW))
    if result["status"] != "PASS":
        raise SystemExit(1)

@main.command("dir")
@click.argument("path", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("-k", "--keyword", default=DEFAULT_KEY, show_default=True, callback=_non_empty)
def dir_cmd(path: Path, keyword: str):
    results = verify_directory(path, keyword)
    click.echo(json.dumps(results, **CANONICAL_JSON_KW))
    if any(r["status"] != "PASS" for r in results.values()):
        raise SystemExit(1)

if __name__ == "__main__":
    main()
