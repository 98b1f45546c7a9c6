"""
Root conftest - shared pytest configuration and fixtures.
Ensures velora_backend is importable when running pytest from the repository
root without installing the package.
"""
import sys
from pathlib import Path

# Ensure the repository root is in path for 'from velora_backend...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
