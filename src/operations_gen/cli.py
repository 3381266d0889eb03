"""Typer-based CLI for generating, listing, and inspecting operation sources."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from operations_gen.assembler import SHAPES, artifact_key, find_shape, generate_all, iter_cells
from operations_gen.builder import ArtifactBuilder
from operations_gen.config import (
    DEFAULT_MAX_ORDER,
    MAX_ORDER_ENV,
    NAMESPACE_ENV,
    resolve_max_order,
    resolve_namespace,
)
from operations_gen.errors import InvalidOrder, SweepFailed
from operations_gen.writer import write_artifacts

app = typer.Typer(add_completion=False, help="operations-gen: generate single-dispatch operation contracts and implementations")

DEFAULT_OUTPUT_ROOT = Path("generated")


def _echo_step(step: int, total: int, message: str) -> None:
    """Print a normalized progress step line."""
    typer.echo(f"[{step}/{total}] {message}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_max_order_or_fail(max_order: int | None) -> int:
    try:
        return resolve_max_order(max_order)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("generate")
def generate(
    max_order: int | None = typer.Option(None, "--max-order", help=f"Highest order to generate (default {DEFAULT_MAX_ORDER})"),
    output_root: Path = typer.Option(DEFAULT_OUTPUT_ROOT, "--output", help="Directory for generated sources"),
    namespace: str | None = typer.Option(None, help="Namespace for generated definitions"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every generated artifact"),
) -> None:
    """Generate every registered shape for orders 1..max-order and write them to disk."""
    _configure_logging(verbose)

    _echo_step(1, 3, "Resolving configuration")
    order = _resolve_max_order_or_fail(max_order)
    resolved_namespace = resolve_namespace(namespace)
    typer.echo(f"    max_order={order} namespace={resolved_namespace} shapes={len(SHAPES)}")

    _echo_step(2, 3, "Generating sources")
    artifacts = generate_all(order, namespace=resolved_namespace)

    _echo_step(3, 3, "Writing sources")
    try:
        manifest = write_artifacts(artifacts, output_root)
    except SweepFailed as exc:
        typer.echo(f"Generation failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Generation complete. artifacts={len(SHAPES) * order} manifest={manifest}")


@app.command("list")
def list_keys(
    max_order: int | None = typer.Option(None, "--max-order", help="Highest order to list"),
) -> None:
    """Print every artifact key in sweep order."""
    order = _resolve_max_order_or_fail(max_order)
    for shape, cell_order in iter_cells(order):
        typer.echo(artifact_key(shape, cell_order))


@app.command("show")
def show(
    shape_name: str = typer.Argument(..., help="Shape base name, e.g. IOperationAsyncFunc"),
    order: int = typer.Option(2, "--order", help="Order to build"),
    namespace: str | None = typer.Option(None, help="Namespace for the generated definition"),
) -> None:
    """Print the generated source for one shape and order."""
    try:
        shape = find_shape(shape_name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0])) from exc

    try:
        text = ArtifactBuilder(shape).build(order, namespace=resolve_namespace(namespace))
    except InvalidOrder as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(text)


@app.command("doctor")
def doctor() -> None:
    """Print the configuration the generator would use."""
    try:
        max_order = str(resolve_max_order())
    except ValueError as exc:
        max_order = f"invalid ({exc})"
    typer.echo(f"Max order: {max_order} (env {MAX_ORDER_ENV})")
    typer.echo(f"Namespace: {resolve_namespace()} (env {NAMESPACE_ENV})")
    typer.echo(f"Shapes: {len(SHAPES)}")


if __name__ == "__main__":
    app()
