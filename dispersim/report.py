"""Terminal report of an envelope, rendered with rich."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dispersim.envelope import BASE_CONSTRUCTIONS, EXPLOSIVE_CONSTRUCTIONS, Envelope, FiringParameters
from dispersim.unit import Degree

CONSOLE = Console()


def parameters_table(params: FiringParameters) -> Table:
    t = Table.grid(padding=(0, 2))
    lat, lon = params.origin.to_deg()
    t.add_row("[b]Firing point[/b]: ", f"{lat:.6f}, {lon:.6f}")
    t.add_row("[b]Firing bearing[/b]: ", f"{params.firing_bearing.to(Degree):.1f}°")
    t.add_row("[b]Dispersion angle[/b]: ", f"{params.dispersion_angle.to(Degree):.1f}°")
    t.add_row("[b]Angle P[/b]: ", f"{params.angle_p.to(Degree):.1f}°")
    t.add_section()
    t.add_row("[b]Distance X[/b]: ", f"{float(params.range_distance):.1f} m")
    t.add_row("[b]Distance W[/b]: ", f"{float(params.distance_w):.1f} m")
    t.add_row("[b]Distance A[/b]: ", f"{float(params.distance_a):.1f} m")
    t.add_row("[b]Distance B[/b]: ", f"{float(params.distance_b):.1f} m")
    t.add_section()
    t.add_row("[b]Munition[/b]: ", params.munition.value)
    t.add_row("[b]Impact[/b]: ", params.impact.value)
    t.add_row("[b]Max height[/b]: ", f"{float(params.max_height):.1f} m")
    return t


def constructions_table(envelope: Envelope) -> Table:
    """Every construction label, drawn or omitted."""
    t = Table(title="Constructions", show_lines=False)
    t.add_column("Label", style="bold")
    t.add_column("Kind")
    t.add_column("Bearing (°)", justify="right")
    t.add_column("Length / radius (m)", justify="right")
    t.add_column("Points", justify="right")
    t.add_column("End point")

    for label in (*BASE_CONSTRUCTIONS, *EXPLOSIVE_CONSTRUCTIONS):
        if label not in envelope:
            t.add_row(label.value, "[dim]omitted[/dim]", "", "", "", "")
            continue
        seg = envelope[label]
        if seg.is_arc:
            bearing = f"{seg.arc.start_bearing.to(Degree):.1f} → {seg.arc.end_bearing.to(Degree):.1f}"
            size = f"{float(seg.arc.radius):.1f}"
            kind = "arc"
        else:
            bearing = f"{seg.bearing.to(Degree):.1f}"
            size = f"{float(seg.length):.1f}"
            kind = "line"
        t.add_row(label.value, kind, bearing, size, str(len(seg.points)), str(seg.end))
    return t


def derived_table(envelope: Envelope) -> Table:
    """Guarded intermediate values and whether a fallback was used."""
    t = Table(title="Derived values")
    t.add_column("Name", style="bold")
    t.add_column("Value", justify="right")
    t.add_column("Status")
    for name, d in envelope.derived.items():
        value = "-" if d.value is None else f"{d.value:.4f}"
        if d.is_fallback:
            status = f"[yellow]fallback[/yellow] {d.guard.name}: {d.reason}"
        else:
            status = "[green]computed[/green]"
        t.add_row(name, value, status)
    return t


def print_report(envelope: Envelope, console: Console = CONSOLE) -> None:
    console.print(Panel(parameters_table(envelope.params), title="Firing parameters", expand=False))
    console.print(constructions_table(envelope))
    if envelope.derived:
        console.print(derived_table(envelope))
