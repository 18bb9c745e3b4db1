#!/usr/bin/env python3
"""Run the unit test suite."""

import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()


def main():
    args = sys.argv[1:]

    # Prefer the pytest next to the interpreter in use
    bin_dir = Path(sys.executable).parent
    pytest_cmd = str(bin_dir / "pytest") if (bin_dir / "pytest").exists() else "pytest"

    test_path = "tests/unit"
    console.print(f"[bold blue]Running unit tests ({test_path})...[/bold blue]")

    try:
        result = subprocess.run([pytest_cmd, test_path, "-m", "unit", *args], check=False)
    except OSError as e:
        console.print(f"[bold red]Error running unit tests: {e}[/bold red]")
        sys.exit(1)

    if result.returncode != 0:
        console.print("[bold red]Unit tests FAILED[/bold red]")
        sys.exit(result.returncode)
    console.print("[bold green]Unit tests PASSED[/bold green]")


if __name__ == "__main__":
    main()
