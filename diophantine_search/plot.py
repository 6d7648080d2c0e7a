"""Scatter plot of a solution set."""
from __future__ import annotations

import os
import tempfile
import warnings
from pathlib import Path

from .solutions import SolutionSet

__all__ = ["render_solutions"]


def _select_backend() -> None:
    import matplotlib  # type: ignore

    try:
        backend = matplotlib.get_backend().lower()
    except Exception:
        backend = ""
    if backend in {"agg", "tkagg"}:
        return
    env_backend = os.environ.get("MPLBACKEND", "").lower()
    prefer_tk = bool(os.environ.get("DISPLAY")) or env_backend == "tkagg"
    if prefer_tk:
        try:
            matplotlib.use("TkAgg")
            return
        except Exception as exc:  # pragma: no cover - depends on system backend
            warnings.warn(
                f"Preferred GUI backend 'TkAgg' unavailable; falling back to 'Agg': {exc}",
                RuntimeWarning,
            )
    matplotlib.use("Agg")


def render_solutions(solutions: SolutionSet, *, title: str | None = None, path: str | None = None) -> str:
    """Plot ``(x, y)`` solutions to a PNG file and return its path.

    Without ``path`` the image goes to a fresh temporary file.
    """
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except Exception as exc:  # pragma: no cover - environment-dependent
        raise RuntimeError("matplotlib is required to plot solutions.") from exc
    _select_backend()

    pairs = solutions.items()
    fig, ax = plt.subplots(figsize=(6, 6))
    if pairs:
        xs, ys = zip(*pairs)
        ax.scatter([float(x) for x in xs], [float(y) for y in ys])
        ax.relim()
        ax.autoscale_view()
    else:
        ax.set_xlim(0, 1)
        ax.set_ylim(0, 1)
    if title:
        ax.set_title(str(title))
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True)

    if path is None:
        fd, path = tempfile.mkstemp(suffix=".png")
        os.close(fd)
    png_path = Path(path)
    fig.savefig(png_path, format="png")
    plt.close(fig)
    return str(png_path)
