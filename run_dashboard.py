#!/usr/bin/env python
"""
Launch the Blood Sugar Scenario Modeler in Streamlit.

Usage:
    python run_dashboard.py [--port 8501] [--headless]

Equivalent to ``streamlit run scenario_modeler/app.py``.
"""

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

APP_PATH = Path(__file__).resolve().parent / "scenario_modeler" / "app.py"


def build_command(port: Optional[int] = None, headless: bool = False) -> List[str]:
    """Streamlit command line for the app."""
    command = [
        sys.executable, "-m", "streamlit", "run", str(APP_PATH),
        "--browser.gatherUsageStats", "false",
    ]
    if port is not None:
        command += ["--server.port", str(port)]
    if headless:
        command += ["--server.headless", "true"]
    return command


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the scenario modeler app")
    parser.add_argument("--port", type=int, help="Port to serve on (Streamlit default 8501)")
    parser.add_argument("--headless", action="store_true", help="Do not open a browser")
    args = parser.parse_args(argv)

    if not APP_PATH.exists():
        print(f"Error: App not found at {APP_PATH}", file=sys.stderr)
        return 1

    return subprocess.run(build_command(args.port, args.headless)).returncode


if __name__ == "__main__":
    sys.exit(main())
