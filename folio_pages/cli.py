"""Cyclopts CLI entrypoint for rendering a portfolio document into HTML pages.

The ``folio-pages`` console script defined here reads one portfolio document
(JSON, or YAML by file suffix) and writes ``index.html`` into the current
working directory, plus ``references.html`` and ``projects.html`` when the
document has references or projects. Each written path is reported on stdout;
usage and load or write failures are reported on stderr with exit status 1.

Examples
--------
Render a portfolio into the current directory:

>>> from folio_pages.cli import main
>>> main(["portfolio.json"])  # doctest: +SKIP
wrote index.html
wrote projects.html
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter

from ._constants import USAGE
from .document import DocumentError, load_document
from .site import build_site

app = App(
    name="folio-pages",
    help="Render a portfolio document into static HTML pages.",
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def generate(
    document: typ.Annotated[
        Path | None, Parameter(help="Path to the portfolio data file")
    ] = None,
) -> None:
    """Render the portfolio pages for ``document`` into the working directory.

    Parameters
    ----------
    document : Path or None, optional
        Portfolio document to render. When omitted, a usage line is printed
        to stderr and the process exits with status 1.

    Returns
    -------
    None
        Writes the HTML pages and prints one ``wrote <path>`` line per page.

    Raises
    ------
    SystemExit
        With status 1 when the argument is missing, the document cannot be
        loaded, or a page cannot be written.
    """
    if document is None:
        print(USAGE, file=sys.stderr)
        raise SystemExit(1)

    try:
        portfolio = load_document(document)
        written = build_site(portfolio, Path.cwd())
    except (OSError, DocumentError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for path in written:
        print(f"wrote {_format_path(path)}")


def main(argv: list[str] | None = None) -> None:
    """Invoke the Cyclopts application behind the ``folio-pages`` command.

    Parameters
    ----------
    argv : list[str] or None, optional
        Command-line tokens; ``None`` reads ``sys.argv[1:]``.

    Examples
    --------
    >>> main(["portfolio.json"])  # doctest: +SKIP
    """
    app(argv)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
