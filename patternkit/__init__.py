"""Search routines, lazy sequences, a SQLite book catalogue and thread-based concurrency patterns."""

__version__ = "0.1.0"

__all__ = [
    "books",
    "channel",
    "fanning",
    "fluent",
    "futures",
    "pool",
    "primitives",
    "ratelimit",
    "scheduler",
    "search",
    "sequences",
    "singleflight",
    "stopping",
    "structures",
]