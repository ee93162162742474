from .vectors import WordVectorQueries

__all__ = [
    "WordVectorQueries",
]
