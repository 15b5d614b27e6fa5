"""Earth-clock driven notifications carrying Vana'diel instants."""
from .ticker import Ticker, tick
from .timer import Timer, after, after_func, sleep

__all__ = ["Ticker", "Timer", "after", "after_func", "sleep", "tick"]
