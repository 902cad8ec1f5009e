from __future__ import annotations

import cProfile
import functools
import io
import pstats
import sys
from pathlib import Path
from typing import Any, Callable, ParamSpec, TypeVar, cast

P = ParamSpec("P")
R = TypeVar("R")

# Functions whose call count is reported as "meshes generated".
MESH_ENTRYPOINTS = ("generate_grid",)


def _report(profiler: cProfile.Profile, out_dir: Path, base: str) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    prof_path = out_dir / f"{base}.prof"
    profiler.dump_stats(prof_path)
    print(f"[profile] wrote {prof_path}")

    try:
        stats = pstats.Stats(str(prof_path))
    except (EOFError, TypeError):
        print("[profile] Warning: No data collected.")
        return

    for cmd in ("tottime", "cumtime", "calls"):
        path = out_dir / f"{base}.{cmd}.txt"
        buf = io.StringIO()
        pstats.Stats(str(prof_path), stream=buf).sort_stats(cmd).print_stats(30)
        path.write_text(buf.getvalue())
        print(f"[profile] wrote {path}")

    mesh_count = 0
    internal_stats = getattr(stats, "stats", {})
    for (_, _, name), (_, nc, _, _, _) in internal_stats.items():
        if name in MESH_ENTRYPOINTS:
            mesh_count += nc

    total_time = getattr(stats, "total_tt", 0)

    print(f"[profile] Total Time: {total_time:.4f}s")
    if mesh_count > 0:
        print(f"[profile] Meshes generated: {mesh_count}")
        if total_time > 0:
            print(f"[profile] Meshes/s: {mesh_count / total_time:.2f}")
    print("[profile] profiling complete")


def profile(
    *,
    out_dir: Path,
    enabled: bool = True,
    target: Callable[..., Any] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Profiling decorator.

    Args:
        out_dir: Directory to save profile stats.
        enabled: Whether profiling is active.
        target: Optional specific function to profile.
                If None, profiles the decorated function (usually main).
                If provided, profiles ONLY this function's execution calls
                aggregated over the lifetime of the decorated function.
                The target is looked up by its module and qualname, so
                callers must reach it through that module attribute.
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        if not enabled:
            return fn

        base = cast(Any, fn).__name__
        if target is not None:
            base += f"_target_{cast(Any, target).__name__}"

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            profiler = cProfile.Profile()

            if target is None:
                profiler.enable()
                try:
                    return fn(*args, **kwargs)
                finally:
                    profiler.disable()
                    _report(profiler, out_dir, base)

            target_any = cast(Any, target)
            owner = sys.modules[target_any.__module__]
            path_parts = target_any.__qualname__.split(".")

            for part in path_parts[:-1]:
                owner = getattr(owner, part)
            method_name = path_parts[-1]

            original_target = getattr(owner, method_name)

            @functools.wraps(original_target)
            def target_interceptor(*t_args, **t_kwargs):
                profiler.enable()
                try:
                    return original_target(*t_args, **t_kwargs)
                finally:
                    profiler.disable()

            setattr(owner, method_name, target_interceptor)
            print(
                f"[profile] Patching {target_any.__qualname__} for targeted profiling"
            )

            try:
                return fn(*args, **kwargs)
            finally:
                setattr(owner, method_name, original_target)
                _report(profiler, out_dir, base)

        return wrapper

    return decorator
