from __future__ import annotations

import logging
from pathlib import Path

import typer

from .api import PhotonVulnListClient
from ..core.errors import PhotonVulnListError
from ..core.usecases.list_versions import is_skipped_branch


app = typer.Typer(help="Mirror Photon OS security advisories into a vuln-list tree")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Fetch every Photon branch and write <vuln-list-dir>/photon/<version>/<package>/<CVE-ID>.json.")
def update(
    vuln_list_dir: Path | None = typer.Option(None, "--vuln-list-dir", help="Root of the vuln-list tree"),
    url: str | None = typer.Option(None, help="Base URL of the Photon CVE metadata feed"),
    retry: int | None = typer.Option(None, min=1, help="Attempts per feed request (default: 5)"),
    progress: bool | None = typer.Option(None, "--progress/--no-progress", help="Show a progress bar per branch (default: on)"),
) -> None:
    try:
        with PhotonVulnListClient(vuln_list_dir=vuln_list_dir, url=url, retry=retry, progress=progress) as client:
            summary = client.update()
    except PhotonVulnListError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Photon: wrote {summary.records_written} advisories for {len(summary.versions)} versions")


@app.command(help="List the branches published in the feed manifest.")
def versions(
    url: str | None = typer.Option(None, help="Base URL of the Photon CVE metadata feed"),
    retry: int | None = typer.Option(None, min=1, help="Attempts per feed request (default: 5)"),
) -> None:
    try:
        with PhotonVulnListClient(url=url, retry=retry, progress=False) as client:
            branches = client.list_versions()
    except PhotonVulnListError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    for branch in branches:
        typer.echo(f"{branch} (skipped)" if is_skipped_branch(branch) else branch)


if __name__ == "__main__":  # pragma: no cover
    app()
