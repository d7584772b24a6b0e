"""CLI entrypoint for guard route queries.

This module owns CLI argument parsing and mode dispatch. All domain logic
lives in the extracted modules:

- ``guard_patrol.io.loader``            – grid text parsing and validation
- ``guard_patrol.config``               – configuration dataclasses
- ``guard_patrol.simulation.tracer``    – single-run tracing
- ``guard_patrol.simulation.search``    – obstruction search
- ``guard_patrol.io.persistence``       – Parquet/JSON trial artifacts
- ``guard_patrol.viz.render``           – PNG route rendering
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from guard_patrol.config.constants import DEFAULT_WORKERS, MAX_SEARCH_WORK_UNITS
from guard_patrol.config.types import SearchConfig
from guard_patrol.domain.errors import GuardPatrolError, UnmodifiedGridLoopsError
from guard_patrol.io.loader import load_grid
from guard_patrol.io.persistence import TrialLogWriter, write_search_summary
from guard_patrol.simulation.search import ObstructionResult, search_obstructions
from guard_patrol.simulation.tracer import trace_from_start

logger = logging.getLogger(__name__)

MODES = ("visited", "obstructions", "both")
"""Queries the CLI can answer."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_str(
    cli_val: object, key: str, file_cfg: dict[str, object]
) -> str | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_str(raw, key)


def _parse_mode(raw_mode: str) -> str:
    if raw_mode not in MODES:
        raise ValueError(f"mode must be one of {', '.join(MODES)}")
    return raw_mode


def _parse_log_level(raw_level: str) -> str:
    level = raw_level.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log-level must be one of {', '.join(LOG_LEVELS)}")
    return level


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Trace a patrolling guard and count loop-inducing obstructions"
    )
    parser.add_argument("input", type=Path, help="Grid file, one row per line")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--mode", type=str, choices=MODES, default=None)
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument(
        "--path-candidates-only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only try obstructions on the unmodified route (same count, fewer trials)",
    )
    parser.add_argument("--max-work-units", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--render", type=Path, default=None, help="Write a PNG of the route")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default=None,
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def _run(
    input_path: Path,
    mode: str,
    search_config: SearchConfig,
    out_dir: Path | None,
    render_path: Path | None,
) -> dict[str, object]:
    grid = load_grid(input_path)
    summary: dict[str, object] = {
        "input": str(input_path),
        "mode": mode,
        "rows": grid.rows,
        "cols": grid.cols,
    }

    baseline = trace_from_start(grid)
    if baseline.looped:
        raise UnmodifiedGridLoopsError()
    if mode in ("visited", "both"):
        summary["visited_count"] = len(baseline.visited)

    result: ObstructionResult | None = None
    if mode in ("obstructions", "both"):
        if out_dir is not None:
            with TrialLogWriter(out_dir) as trial_log:
                result = search_obstructions(grid, search_config, trial_sink=trial_log)
            write_search_summary(
                out_dir,
                result,
                visited_count=len(baseline.visited),
                grid_shape=(grid.rows, grid.cols),
            )
            summary["out_dir"] = str(out_dir)
        else:
            result = search_obstructions(grid, search_config)
        summary["loop_obstructions"] = result.loop_count
        summary["candidates_checked"] = result.candidates_checked

    if render_path is not None:
        from guard_patrol.viz.render import render_route

        loops = result.loop_positions if result is not None else ()
        summary["render"] = str(render_route(grid, baseline, render_path, loop_positions=loops))
    return summary


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    Failures print one line on stderr and exit with status 1.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        log_level = _parse_log_level(
            _coerce_str(_get_val(args.log_level, "log_level", file_cfg, "WARNING"), "log_level")
        )
        mode = _parse_mode(_coerce_str(_get_val(args.mode, "mode", file_cfg, "both"), "mode"))
        search_config = SearchConfig(
            workers=_get_int(args.workers, "workers", file_cfg, DEFAULT_WORKERS),
            path_candidates_only=_get_bool(
                args.path_candidates_only, "path_candidates_only", file_cfg, False
            ),
            max_work_units=_get_int(
                args.max_work_units, "max_work_units", file_cfg, MAX_SEARCH_WORK_UNITS
            ),
        )
        out_dir_raw = _get_optional_str(args.out_dir, "out_dir", file_cfg)
        render_raw = _get_optional_str(args.render, "render", file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    try:
        summary = _run(
            input_path=args.input,
            mode=mode,
            search_config=search_config,
            out_dir=Path(out_dir_raw) if out_dir_raw is not None else None,
            render_path=Path(render_raw) if render_raw is not None else None,
        )
    except (GuardPatrolError, OSError, ValueError) as exc:
        logger.debug("run failed", exc_info=True)
        parser.exit(1, f"error: {exc}\n")
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
