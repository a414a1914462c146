"""Grover search lab command line interface.

Renders the classical-vs-quantum comparison in the terminal with Typer
and Rich. All pacing lives here; the simulator itself never waits.
"""

from __future__ import annotations

import logging
import math
import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .classical import expected_classical_attempts
from .config import DEFAULT_CHECK_DELAY, DEFAULT_REPEATS, DEFAULT_SIZE, DEFAULT_SIZES, SimulatorConfig
from .experiment_logging import scaling_table, summarize_attempts, sweep_trials
from .session import CellStatus, SearchSession

app = typer.Typer(help="Grover Search Lab - Classical vs Quantum Search CLI")
console = Console()
DEFAULT_SIZES_OPTION = ",".join(map(str, DEFAULT_SIZES))

_CELL_STYLES = {
    CellStatus.UNCHECKED: "dim",
    CellStatus.CHECKED_CLASSICAL: "black on yellow",
    CellStatus.CHECKED_QUANTUM: "magenta",
    CellStatus.FOUND: "bold white on green",
}


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Compare classical linear search with a simulated Grover search."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def demo(
    size: int = typer.Option(DEFAULT_SIZE, "--size", "-n", help="Search space size (N)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the target"),
):
    """Pick a hidden target and run both searches on it."""
    session = _new_session(size, seed)

    console.print(f"[bold green]=== Grover's Search: Find the Hidden Number (1-{size}) ===[/bold green]\n")
    console.print(f"Hidden target: [bold]{session.target + 1}[/bold]\n")

    session.run_classical_search()
    console.print("[bold]Classical Search[/bold]")
    _print_grid(session)

    session.run_quantum_search()
    console.print("[bold]Quantum Search[/bold]")
    _print_grid(session)

    _print_results(session)


@app.command()
def classical(
    size: int = typer.Option(DEFAULT_SIZE, "--size", "-n", help="Search space size (N)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the target"),
    delay: float = typer.Option(DEFAULT_CHECK_DELAY, "--delay", help="Seconds between checks"),
):
    """Check items one by one until the hidden number is found."""
    session = _new_session(size, seed)
    console.print(f"[bold blue]Classical search over 1-{size}[/bold blue]")

    def on_check(probe):
        mark = "[green]found[/green]" if probe.is_match else "[yellow]no[/yellow]"
        console.print(f"  check {probe.index + 1}: {mark}")
        if delay > 0:
            time.sleep(delay)

    attempts = session.run_classical_search(on_check=on_check)
    console.print(f"Classical attempts: [bold]{attempts}[/bold]")


@app.command()
def quantum(
    size: int = typer.Option(DEFAULT_SIZE, "--size", "-n", help="Search space size (N)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the target"),
):
    """Run the simulated Grover search once."""
    session = _new_session(size, seed)
    console.print(f"[bold magenta]Quantum search over 1-{size}[/bold magenta]")

    found = session.run_quantum_search()
    console.print(f"Found: [bold]{found + 1}[/bold]")
    console.print(f"Quantum attempts: [bold]{session.quantum_attempts}[/bold]")


@app.command()
def compare(
    sizes: str = typer.Option(DEFAULT_SIZES_OPTION, "--sizes", help="Comma separated sizes"),
):
    """Show how classical and quantum attempt counts scale with N."""
    df = scaling_table(_parse_sizes(sizes))

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("N", justify="right")
    table.add_column("Classical (worst)", justify="right")
    table.add_column("Classical (avg)", justify="right")
    table.add_column("Quantum", justify="right")
    table.add_column("Quantum / sqrt(N)", justify="right")
    table.add_column("Speedup", justify="right")

    for row in df.itertuples(index=False):
        table.add_row(
            str(row.size),
            str(row.classical_worst),
            f"{row.classical_expected:.1f}",
            str(row.quantum_attempts),
            f"{row.quantum_per_sqrt_n:.3f}",
            f"{row.speedup:.1f}x",
        )

    console.print(table)
    console.print(f"\nNote: quantum attempts track (pi/4) * sqrt(N) = {math.pi / 4:.3f} * sqrt(N).")


@app.command()
def sweep(
    sizes: str = typer.Option(DEFAULT_SIZES_OPTION, "--sizes", help="Comma separated sizes"),
    repeats: int = typer.Option(DEFAULT_REPEATS, "--repeats", "-r", help="Targets drawn per size"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the sweep"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write raw trials to CSV"),
):
    """Run many random trials and summarize the average attempts."""
    try:
        df = sweep_trials(_parse_sizes(sizes), repeats=repeats, config=SimulatorConfig(seed=seed))
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)
    summary = summarize_attempts(df)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("N", justify="right")
    table.add_column("Trials", justify="right")
    table.add_column("Classical (mean)", justify="right")
    table.add_column("Classical (expected)", justify="right")
    table.add_column("Quantum (mean)", justify="right")
    table.add_column("Speedup", justify="right")

    for row in summary.itertuples(index=False):
        table.add_row(
            str(row.size),
            str(row.trials),
            f"{row.classical_mean:.2f}",
            f"{row.classical_expected:.1f}",
            f"{row.quantum_mean:.2f}",
            f"{row.speedup:.1f}x",
        )

    console.print(table)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        console.print(f"\nResults saved to: {output}")


def _new_session(size: int, seed: Optional[int]) -> SearchSession:
    try:
        session = SearchSession(size, SimulatorConfig(seed=seed))
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)
    session.start_new_search()
    return session


def _parse_sizes(sizes: str) -> List[int]:
    try:
        parsed = [int(s) for s in sizes.split(",") if s.strip()]
    except ValueError:
        console.print(f"[bold red]Error:[/bold red] invalid sizes: {sizes!r}")
        raise typer.Exit(code=1)

    if not parsed or any(n <= 0 for n in parsed):
        console.print(f"[bold red]Error:[/bold red] sizes must be positive integers: {sizes!r}")
        raise typer.Exit(code=1)
    return parsed


def _print_grid(session: SearchSession, columns: int = 4):
    """Print the search space as a grid of 1-based labels."""
    table = Table(show_header=False, show_lines=True)
    for _ in range(columns):
        table.add_column(justify="center", width=5)

    cells = [
        f"[{_CELL_STYLES[session.cell_status(i)]}]{i + 1}[/]"
        for i in session.simulator.space
    ]
    for start in range(0, len(cells), columns):
        row = cells[start:start + columns]
        table.add_row(*row, *([""] * (columns - len(row))))

    console.print(table)


def _print_results(session: SearchSession):
    """Print the attempt counts of both searches."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Search")
    table.add_column("Attempts", justify="right")
    table.add_column("Average", justify="right")

    classical_avg = expected_classical_attempts(session.size)
    quantum_avg = math.pi / 4 * math.sqrt(session.size)

    table.add_row("Classical", str(session.classical_attempts), f"~{classical_avg:.1f}")
    table.add_row("[magenta]Quantum[/magenta]", str(session.quantum_attempts), f"~{quantum_avg:.1f}")

    console.print(table)
    console.print(
        "\n[blue]Quantum search does not check answers one by one; "
        "amplitude amplification gives it a quadratic speedup.[/blue]"
    )


if __name__ == "__main__":
    app()
