"""Typer CLI entrypoint for bundlecat."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .cluster import load_core_api
from .config import load_settings
from .emit import write_output
from .exceptions import (
    BundleNameError,
    BundlecatError,
    ClusterError,
    ConfigError,
    OutputError,
    PayloadDecodeError,
)
from .logging_config import configure_logging
from .pipeline import unpack_bundle, validate_bundle_name
from .selector import new_bundle_configmap_selector


EXIT_FAILURE = 1


app = typer.Typer(help="Inspect the unpacked contents of rukpak Bundles")


@app.callback()
def main_callback() -> None:
    """Base command callback reserved for shared options."""


@app.command("evaluate")
def evaluate(
    bundle: str = typer.Option(
        "",
        "--bundle",
        "-b",
        help="Configures which Bundle resources to unpack",
    ),
    namespace: Optional[str] = typer.Option(
        None,
        "--namespace",
        "-n",
        help="Configures the namespace to find the Bundle underlying resources [default: rukpak-system]",
    ),
    kubeconfig: Optional[str] = typer.Option(
        None,
        "--kubeconfig",
        help="Path to a kubeconfig file",
    ),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        help="Kubeconfig context to use",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional TOML settings file",
    ),
    unsorted: bool = typer.Option(
        False,
        "--unsorted",
        help="Keep payloads in API order instead of sorting them by key",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr",
    ),
) -> None:
    """Print the decoded manifests of a Bundle, separated by '---'."""

    try:
        bundle = validate_bundle_name(bundle)
    except BundleNameError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(EXIT_FAILURE) from exc

    try:
        settings = load_settings(
            config_path,
            overrides={
                "namespace": namespace,
                "kubeconfig": kubeconfig,
                "context": context,
                "sort_payload_keys": False if unsorted else None,
                "log_level": "DEBUG" if verbose else None,
            },
        )
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(EXIT_FAILURE) from exc

    configure_logging(settings.log_level)

    try:
        core_api = load_core_api(kubeconfig=settings.kubeconfig, context=settings.context)
        result = unpack_bundle(
            core_api,
            bundle,
            namespace=settings.namespace,
            sort_keys=settings.sort_payload_keys,
        )
        if result.is_empty:
            return
        write_output(result.text)
    except ClusterError as exc:
        typer.echo(f"Cluster error: {exc}", err=True)
        raise typer.Exit(EXIT_FAILURE) from exc
    except PayloadDecodeError as exc:
        typer.echo(f"Decode error: {exc}", err=True)
        raise typer.Exit(EXIT_FAILURE) from exc
    except OutputError as exc:
        typer.echo(f"Output error: {exc}", err=True)
        raise typer.Exit(EXIT_FAILURE) from exc
    except BundlecatError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_FAILURE) from exc


@app.command("selector")
def selector_command(
    bundle: str = typer.Option(
        "",
        "--bundle",
        "-b",
        help="Bundle whose ConfigMap selector to print",
    ),
) -> None:
    """Print the label selector used to find a Bundle's ConfigMaps."""

    try:
        bundle = validate_bundle_name(bundle)
    except BundleNameError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(EXIT_FAILURE) from exc

    typer.echo(str(new_bundle_configmap_selector(bundle)))


def main() -> None:
    app()
