"""
Pytest fixtures for the quick sort frame tree tests.

Provides:
- the demo array and seeded random arrays
- a reference counter of recursive calls, independent of the tree
- structural recounts of the tree through the pre-order walk
"""

import subprocess
import sys
from pathlib import Path
import numpy as np
import pytest

from sort_frames import frame_tree, walk


@pytest.fixture
def demo_array():
    return np.array([3, 5, 2, 7, 8, 6, 1, 9, 3, 4], dtype=np.int64)


@pytest.fixture
def random_arrays():
    """Seeded random arrays of various sizes, with plenty of duplicates."""
    rng = np.random.RandomState(42)
    arrays = [rng.randint(0, 10, size=size).astype(np.int64) for size in range(0, 30)]
    arrays += [rng.randint(-1000, 1000, size=200).astype(np.int64) for _ in range(10)]
    return arrays


@pytest.fixture
def call_counter(monkeypatch):
    """
    Counts the calls of quick_sort_segment while the test runs.

    Usage:
        root = quick_sort(a)
        assert count(root) == call_counter['calls']
    """
    counter = {'calls': 0}
    original = frame_tree.quick_sort_segment

    def counting_segment(a, left, right):
        counter['calls'] += 1
        return original(a, left, right)

    monkeypatch.setattr(frame_tree, 'quick_sort_segment', counting_segment)
    return counter


@pytest.fixture
def structural_stats():
    """Frame count and depth recomputed from the pre-order walk."""
    def _stats(root):
        visits = list(walk(root))
        return len(visits), 1 + max(visit.depth for visit in visits)
    return _stats


@pytest.fixture
def project_root():
    """Path to the directory holding the command line scripts."""
    return Path(__file__).parent.parent


@pytest.fixture
def run_script(project_root):
    """
    Fixture that returns a function running one of the command line scripts.

    Usage:
        result = run_script("trace_cmd.py", ["--quiet"])
        assert result.returncode == 0
    """
    def _run(script, args=(), stdin=None):
        return subprocess.run(
            [sys.executable, str(project_root / script)] + list(args),
            input=stdin,
            capture_output=True,
            text=True,
            cwd=project_root,
        )
    return _run
