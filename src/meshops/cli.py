"""CLI entry point for meshops.

Usage:
    meshops build mesh.yaml --triangulate --normals     # Build one mesh
    meshops build mesh.yaml --glb out.glb               # ... and export it
    meshops components mesh.yaml                        # Split into components
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from meshops.core.logging import setup_logging

app = typer.Typer(name="meshops", help="Mesh validation, orientation repair and splitting")
console = Console()


def _options(
    options_file: Optional[Path],
    triangulate: bool,
    clean: bool,
    normals: bool,
    numeric_policy: Optional[str],
    index_origin: Optional[int],
):
    from meshops.core.options import load_build_options
    from meshops.mesh.builder import resolve_options

    base = load_build_options(options_file) if options_file else None
    overrides = {}
    # Flags only switch options on, so an options file can still enable them
    if triangulate:
        overrides["triangulate"] = True
    if clean:
        overrides["clean"] = True
    if normals:
        overrides["normals"] = True
    if numeric_policy is not None:
        overrides["numeric_policy"] = numeric_policy
    if index_origin is not None:
        overrides["index_origin"] = index_origin
    return resolve_options(base, **overrides)


def _mesh_row(table: Table, label: str, mesh) -> None:
    lengths = mesh.edges_table.length
    table.add_row(
        label,
        str(mesh.n_vertices),
        str(mesh.n_faces),
        str(len(mesh.edges_table)),
        str(len(mesh.exterior_edges)),
        f"{lengths.min():.4g} - {lengths.max():.4g}" if len(lengths) else "-",
        mesh.render_class.value,
        "Y" if mesh.normals is not None else "N",
    )


def _mesh_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim")
    table.add_column("Vertices", style="cyan")
    table.add_column("Faces", style="cyan")
    table.add_column("Edges", style="green")
    table.add_column("Exterior", style="yellow")
    table.add_column("Edge lengths", style="dim")
    table.add_column("Render class", style="green")
    table.add_column("Normals", style="dim")
    return table


@app.command()
def build(
    mesh_file: Path = typer.Argument(..., help="YAML/JSON file with `vertices` and `faces`"),
    triangulate: bool = typer.Option(False, "--triangulate", help="Triangulate the faces"),
    clean: bool = typer.Option(False, "--clean", help="Merge duplicates, drop isolated vertices"),
    normals: bool = typer.Option(False, "--normals", help="Compute vertex normals"),
    numeric_policy: Optional[str] = typer.Option(
        None, help="approximate | exact_symbolic | exact_rational"
    ),
    index_origin: Optional[int] = typer.Option(None, help="Index of the first vertex (0 or 1)"),
    options_file: Optional[Path] = typer.Option(None, "--options", help="Build options YAML"),
    glb: Optional[Path] = typer.Option(None, help="Export the result as GLB"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Build one mesh and print its summary."""
    setup_logging(log_level)
    from meshops.core.errors import MeshError
    from meshops.core.options import load_mesh_file
    from meshops.mesh.builder import build_mesh
    from meshops.mesh.render import to_renderable

    opts = _options(options_file, triangulate, clean, normals, numeric_policy, index_origin)
    try:
        vertices, faces = load_mesh_file(mesh_file, opts.numeric_policy)
        mesh = build_mesh(vertices, faces, options=opts)
        render = to_renderable(mesh) if glb else None
    except MeshError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    for advisory in mesh.advisories:
        console.print(f"[yellow]{advisory}[/yellow]")

    table = _mesh_table(f"Mesh: {mesh_file.name}")
    _mesh_row(table, "1", mesh)
    console.print(table)

    if render is not None:
        glb.parent.mkdir(parents=True, exist_ok=True)
        render.to_trimesh().export(str(glb), file_type="glb")
        console.print(f"[green]GLB exported:[/green] {glb}")


@app.command()
def components(
    mesh_file: Path = typer.Argument(..., help="YAML/JSON file with `vertices` and `faces`"),
    triangulate: bool = typer.Option(False, "--triangulate", help="Triangulate the faces"),
    clean: bool = typer.Option(False, "--clean", help="Merge duplicates, drop isolated vertices"),
    normals: bool = typer.Option(False, "--normals", help="Compute vertex normals"),
    numeric_policy: Optional[str] = typer.Option(
        None, help="approximate | exact_symbolic | exact_rational"
    ),
    index_origin: Optional[int] = typer.Option(None, help="Index of the first vertex (0 or 1)"),
    options_file: Optional[Path] = typer.Option(None, "--options", help="Build options YAML"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Split a mesh into its connected components."""
    setup_logging(log_level)
    from meshops.core.errors import MeshError
    from meshops.core.options import load_mesh_file
    from meshops.mesh.builder import split_connected_components

    opts = _options(options_file, triangulate, clean, normals, numeric_policy, index_origin)
    try:
        vertices, faces = load_mesh_file(mesh_file, opts.numeric_policy)
        meshes = split_connected_components(vertices, faces, options=opts)
    except MeshError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = _mesh_table(f"Components of {mesh_file.name}: {len(meshes)}")
    for i, mesh in enumerate(meshes, 1):
        _mesh_row(table, str(i), mesh)
    console.print(table)


if __name__ == "__main__":
    app()
