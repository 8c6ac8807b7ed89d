# chess_scripts/common.py
"""Common utilities for management scripts."""

from __future__ import annotations
import logging
import os
import subprocess
import sys
from pathlib import Path

log = logging.getLogger("chess_scripts.common")


def print_header(text: str):
    """Print formatted header for console output."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).resolve().parents[1]


def run_uvicorn(module: str, host: str = "0.0.0.0", port: int = 8000, reload: bool = False) -> int:
    """Start uvicorn server with the current interpreter."""
    root = project_root()
    os.chdir(root)
    print(f"Starting server at http://{host}:{port}")

    cmd = [sys.executable, "-m", "uvicorn", module, "--host", host, "--port", str(port)]
    if reload:
        cmd.append("--reload")

    return subprocess.run(cmd).returncode


def start_server(host: str = "0.0.0.0", port: int = 8000, reload: bool = False) -> int:
    """Start the analyzer API server."""
    print_header("Starting Chessboard Analyzer Server")
    return run_uvicorn("main:app", host=host, port=port, reload=reload)
