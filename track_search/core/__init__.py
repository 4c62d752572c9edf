from .pipeline import run_search
from .store import TrackStore

__all__ = ["TrackStore", "run_search"]
