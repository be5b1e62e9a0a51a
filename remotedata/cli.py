from argparse import ArgumentParser
from dataclasses import dataclass, field
from pathlib import Path
import re
import sys
import tomllib
from typing import Any, Optional
import argh  # type: ignore
from rich.console import Console

from rich_argparse import RichHelpFormatter
from rich.table import Table

from .codec import decode, encode
from .construct import construct, read_from_file
from .conversions import from_list
from .errors import HelpfulUserError, UserError
from .logging import logger, configure_logger, THEME
from .remote_data import RemoteData, fold, state
from .version import __version__

log = logger()

STYLES = {
    "not_asked": "remotedata.pending",
    "loading": "remotedata.pending",
    "failure": "remotedata.failure",
    "success": "remotedata.success",
}


@dataclass
class Report:
    """A list of named fetch states, each `{name, state, value?, error?}`."""
    item: list[dict[str, Any]] = field(default_factory=list)

    def entries(self) -> list[tuple[str, RemoteData[Any, Any]]]:
        return [(str(e.get("name", f"#{i}")), decode(e)) for i, e in enumerate(self.item)]


def describe(data: RemoteData[Any, Any]) -> str:
    return fold(
        data,
        lambda: "",
        lambda: "",
        lambda e: f"{e!r}",
        lambda v: f"{v!r}")


def load_report(input_file: Optional[str]) -> Report:
    if input_file is not None:
        if m := re.match(r"([^\[\]]+)\[([^\[\]\s]+)\]", input_file):
            input_path = Path(m.group(1))
            section = m.group(2)
        else:
            input_path = Path(input_file)
            section = None

        return read_from_file(Report, input_path, section)

    elif Path("remotedata.toml").exists():
        return read_from_file(Report, Path("remotedata.toml"))

    elif Path("pyproject.toml").exists():
        with open("pyproject.toml", "rb") as f_in:
            data = tomllib.load(f_in)
        try:
            for s in ["tool", "remotedata"]:
                data = data[s]
        except KeyError as e:
            raise HelpfulUserError(
                f"Without the `-i` argument, RemoteData looks for `remotedata.toml` first, "
                f"then for a `[tool.remotedata]` section in `pyproject.toml`. A "
                f"`pyproject.toml` file was found, but contained no `[tool.remotedata]` section."
            ) from e

        return construct(Report, data)

    raise HelpfulUserError(
        "No input file given, no `remotedata.toml` found and no `pyproject.toml` found."
    )


def render(report: Report, console: Console):
    entries = report.entries()
    total = from_list(data for _, data in entries)

    t = Table(title="Remote data", header_style="italic green", show_edge=False)
    t.add_column("name", style="bold")
    t.add_column("state")
    t.add_column("payload")
    for name, data in entries:
        tag = state(data).name.lower()
        t.add_row(name, f"[{STYLES[tag]}]{tag}", describe(data))
    tag = state(total).name.lower()
    t.add_section()
    t.add_row("all", f"[{STYLES[tag]}]{tag}", describe(total), style="italic")
    console.print(t)


@argh.arg(
    "-i",
    "--input-file",
    help="TOML or JSON file, use a `[...]` suffix to indicate a subsection.",
)
@argh.arg("--json", help="print the aggregate state as JSON")
@argh.arg("-v", "--version", help="print version number and exit")
@argh.arg("--debug", help="more verbose logging")
def remotedata(
    *,
    input_file: Optional[str] = None,
    json: bool = False,
    version: bool = False,
    debug: bool = False
):
    """Summarize the fetch states listed in a file."""
    if version:
        print(f"RemoteData {__version__}")
        sys.exit(0)

    configure_logger(debug)
    console = Console(theme=THEME)
    try:
        report = load_report(input_file)
        log.debug(f"read {len(report.item)} items")
        if json:
            total = from_list(data for _, data in report.entries())
            console.print_json(data=encode(total))
        else:
            render(report, console)
    except UserError as e:
        log.error(f"Failed: {e}")
        sys.exit(1)


def cli():
    parser = ArgumentParser(formatter_class=RichHelpFormatter)
    argh.set_default_command(parser, remotedata)
    argh.dispatch(parser)


if __name__ == "__main__":
    cli()
