from .moving_average import WindowSizeError, moving_average, moving_averages

__all__ = ["WindowSizeError", "moving_average", "moving_averages"]
