"""Pytest configuration for the exact numeric tower test suite."""

import sys
from pathlib import Path

# Modules live at the repository root
sys.path.insert(0, str(Path(__file__).parent.parent))
