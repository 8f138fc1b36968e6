from .compose import DEFAULT_PALETTE, DisplayOptions, TraceSpec, build_figure, compose

__all__ = ["DEFAULT_PALETTE", "DisplayOptions", "TraceSpec", "build_figure", "compose"]
