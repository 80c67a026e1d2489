from .read_model_cache import (
    InMemoryReadModelCache,
    ReadModelCache,
    RedisReadModelCache,
    build_read_model_cache,
)

__all__ = [
    "ReadModelCache",
    "InMemoryReadModelCache",
    "RedisReadModelCache",
    "build_read_model_cache",
]
