"""Public package exports for the TVMaze API client."""

from .async_client import AsyncTvMazeClient
from .client import TvMazeClient
from .config import TvMazeClientConfig

__all__ = ["TvMazeClient", "AsyncTvMazeClient", "TvMazeClientConfig"]
