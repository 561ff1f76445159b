#!/usr/bin/env python3
"""
Setup script for the X3D scene benchmark.
Installs the x3test package, Playwright and the Chromium browser.

Usage:
    python scripts/setup.py          # runtime install
    python scripts/setup.py --dev    # also installs the test extra (pytest, pytest-asyncio)
"""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_command(cmd, description):
    """Run a command and report status."""
    print(f"\n📦 {description}...")
    try:
        result = subprocess.run(cmd, cwd=PROJECT_ROOT, check=True, capture_output=True, text=True)
        print(f"✅ {description} completed")
        if result.stdout:
            print(result.stdout)
        return True
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed")
        if e.stderr:
            print(e.stderr)
        return False


def main():
    print("🚀 Setting up x3test...")

    if sys.version_info < (3, 8):
        print("❌ Python 3.8+ required")
        sys.exit(1)

    extras = ".[test]" if "--dev" in sys.argv[1:] else "."
    if not run_command(
        [sys.executable, "-m", "pip", "install", "-e", extras],
        "Installing x3test and Playwright",
    ):
        sys.exit(1)

    if not run_command(
        [sys.executable, "-m", "playwright", "install", "chromium"],
        "Installing Chromium browser",
    ):
        sys.exit(1)

    print("\n✅ Setup complete! You can now run:")
    print("   x3test --url http://localhost:8000/scene.html --duration 20 --output fps-log.json")
    if extras != ".":
        print("   pytest                # unit tests")
        print("   pytest -m browser     # in-page recorder against headless Chromium")


if __name__ == "__main__":
    main()
