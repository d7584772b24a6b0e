"""Visualization: static PNG rendering of traced routes."""

from guard_patrol.viz.render import render_route

__all__ = ["render_route"]
