"""Matplotlib rendering of a grid, the agent's route and loop obstructions."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import BoundaryNorm, ListedColormap  # noqa: E402
from matplotlib.image import AxesImage  # noqa: E402
from matplotlib.patches import Patch  # noqa: E402

from guard_patrol.config.types import RenderConfig  # noqa: E402
from guard_patrol.domain.direction import Position  # noqa: E402
from guard_patrol.domain.grid import Cell, Grid  # noqa: E402
from guard_patrol.simulation.tracer import RunOutcome  # noqa: E402

OPEN_COLOR = "#f4f1ea"
BLOCKED_COLOR = "#3b3b3b"
VISITED_COLOR = "#8fb9d9"
START_COLOR = "#d9822b"
LOOP_MARKER_COLOR = "#c0392b"
GRID_LINE_COLOR = "#d0ccc0"

# Layer codes of the rendered array, in colormap order
_OPEN, _BLOCKED, _VISITED, _START = 0, 1, 2, 3


def _build_route_array(grid: Grid, visited: Iterable[Position]) -> np.ndarray:
    """Return (rows, cols) int array of layer codes for imshow."""
    layers = np.full((grid.rows, grid.cols), _OPEN, dtype=int)
    layers[grid.cells == Cell.BLOCKED] = _BLOCKED
    for row, col in visited:
        layers[row, col] = _VISITED
    layers[grid.cells >= Cell.AGENT_UP] = _START
    return layers


def _route_cmap() -> tuple[ListedColormap, BoundaryNorm]:
    cmap = ListedColormap([OPEN_COLOR, BLOCKED_COLOR, VISITED_COLOR, START_COLOR])
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5, 3.5], cmap.N)
    return cmap, norm


def _draw_cell_grid(
    ax: plt.Axes,
    layers: np.ndarray,
    cmap: ListedColormap,
    norm: BoundaryNorm,
    show_grid_lines: bool,
) -> AxesImage:
    """imshow with subtle grid lines on *ax*."""
    img = ax.imshow(layers, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    if show_grid_lines:
        h, w = layers.shape
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_route(
    grid: Grid,
    outcome: RunOutcome,
    output_path: Path,
    loop_positions: Iterable[Position] = (),
    config: RenderConfig | None = None,
) -> Path:
    """Render *outcome* over *grid* to a PNG; returns the written path.

    Loop-inducing obstruction positions, when given, are drawn as crosses.
    """
    render_config = config or RenderConfig()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    layers = _build_route_array(grid, outcome.visited)
    cmap, norm = _route_cmap()
    size = render_config.cell_size_inches
    fig, ax = plt.subplots(figsize=(max(grid.cols * size, 2.0), max(grid.rows * size, 2.0)))
    try:
        _draw_cell_grid(ax, layers, cmap, norm, render_config.show_grid_lines)
        loops = list(loop_positions)
        if loops:
            ax.scatter(
                [col for _, col in loops],
                [row for row, _ in loops],
                marker="x",
                color=LOOP_MARKER_COLOR,
                s=max(20.0, 200.0 * size),
                linewidths=1.5,
            )
        handles = [
            Patch(facecolor=VISITED_COLOR, edgecolor="gray", label="Visited"),
            Patch(facecolor=BLOCKED_COLOR, edgecolor="gray", label="Blocked"),
            Patch(facecolor=START_COLOR, edgecolor="gray", label="Start"),
        ]
        ax.legend(
            handles=handles,
            loc="upper center",
            bbox_to_anchor=(0.5, -0.02),
            ncol=len(handles),
            fontsize=7,
            frameon=False,
        )
        title = render_config.title or (
            f"{outcome.termination.value}: {len(outcome.visited)} cells, {outcome.steps} steps"
        )
        ax.set_title(title, fontsize=9)
        fig.savefig(output_path, dpi=render_config.dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path
