from __future__ import annotations

import pathlib
from dataclasses import dataclass
from typing import Callable

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from meshcreator._config import get_default_dimensions
from meshcreator.mesh import Mesh, analyze_mesh
from meshcreator.modeling.primitives import PrimitiveBuilder
from meshcreator.sink import MeshSink, PyVistaSink, SinkGroup, StlSink

console = Console()
app = typer.Typer(help="Generate procedural quad and box meshes.")


@dataclass(frozen=True)
class OutputOptions:
    output: pathlib.Path | None
    ascii: bool
    overwrite: bool
    preview: bool
    screenshot: pathlib.Path | None


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _resolve_output(opts: OutputOptions) -> pathlib.Path | None:
    if opts.output is None:
        return None
    if opts.output.exists() and not opts.overwrite:
        final_output = _next_available_path(opts.output)
        console.print(f"[yellow]Output {opts.output} exists; writing to {final_output} instead.[/yellow]")
        return final_output
    return opts.output


def _summarize(mesh: Mesh) -> str:
    analysis = analyze_mesh(mesh)
    xmin, xmax, ymin, ymax, zmin, zmax = mesh.bounds
    lines = [
        f"Vertices: {mesh.n_vertices}",
        f"Triangles: {mesh.n_faces}",
        escape(f"Bounds: x[{xmin:.4g}, {xmax:.4g}] y[{ymin:.4g}, {ymax:.4g}] z[{zmin:.4g}, {zmax:.4g}]"),
    ]
    issues = analysis.issues()
    if issues:
        lines.append(f"[yellow]Issues: {'; '.join(issues)}[/yellow]")
    return "\n".join(lines)


def _run(build: Callable[[PrimitiveBuilder], Mesh], opts: OutputOptions) -> Mesh:
    sinks: list[MeshSink] = []

    output = _resolve_output(opts)
    if output is not None:
        sinks.append(StlSink(output, ascii=opts.ascii))

    viewer: PyVistaSink | None = None
    if opts.preview or opts.screenshot is not None:
        viewer = PyVistaSink()
        sinks.append(viewer)

    builder = PrimitiveBuilder(sink=SinkGroup(*sinks))
    try:
        mesh = build(builder)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print(Panel(_summarize(mesh), title=f"{mesh.name} mesh", border_style="green"))
    if output is not None:
        mode = "ASCII" if opts.ascii else "binary"
        console.print(f"Wrote {mode} STL to [green]{output}[/green].")

    if viewer is not None:
        viewer.plot(screenshot=opts.screenshot)
        if opts.screenshot is not None:
            console.print(f"Saved screenshot to [green]{opts.screenshot}[/green].")
    return mesh


_OUTPUT_HELP = "Path to an STL file to write."


@app.command()
def quad(
    width: float | None = typer.Option(None, help="Extent along +X (defaults to the configured width)."),
    length: float | None = typer.Option(None, help="Extent along +Z (defaults to the configured length)."),
    output: pathlib.Path | None = typer.Option(None, "--output", "-o", help=_OUTPUT_HELP),
    ascii: bool = typer.Option(False, "--ascii", help="Write ASCII STL instead of binary."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing STL."),
    preview: bool = typer.Option(False, "--preview/--no-preview", help="Open a PyVista window."),
    screenshot: pathlib.Path | None = typer.Option(
        None, "--screenshot", help="Render off screen and save a screenshot."
    ),
) -> None:
    """
    Build a flat quad from the origin along +X and +Z, facing +Y.
    """

    defaults = get_default_dimensions()
    w = defaults.width if width is None else width
    l = defaults.length if length is None else length
    opts = OutputOptions(output=output, ascii=ascii, overwrite=overwrite, preview=preview, screenshot=screenshot)
    _run(lambda builder: builder.create_quad_mesh(w, l), opts)


@app.command()
def cube(
    width: float | None = typer.Option(None, help="Extent along X (defaults to the configured width)."),
    height: float | None = typer.Option(None, help="Extent along Y (defaults to the configured height)."),
    length: float | None = typer.Option(None, help="Extent along Z (defaults to the configured length)."),
    output: pathlib.Path | None = typer.Option(None, "--output", "-o", help=_OUTPUT_HELP),
    ascii: bool = typer.Option(False, "--ascii", help="Write ASCII STL instead of binary."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing STL."),
    preview: bool = typer.Option(False, "--preview/--no-preview", help="Open a PyVista window."),
    screenshot: pathlib.Path | None = typer.Option(
        None, "--screenshot", help="Render off screen and save a screenshot."
    ),
) -> None:
    """
    Build a closed box centered on the origin.
    """

    defaults = get_default_dimensions()
    w = defaults.width if width is None else width
    h = defaults.height if height is None else height
    l = defaults.length if length is None else length
    opts = OutputOptions(output=output, ascii=ascii, overwrite=overwrite, preview=preview, screenshot=screenshot)
    _run(lambda builder: builder.create_cube_mesh(w, h, l), opts)


if __name__ == "__main__":
    app()
