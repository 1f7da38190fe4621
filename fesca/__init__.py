"""Three-party replicated secret sharing of tables, share computation and storage."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "data_owner",
    "encode",
    "hashing",
    "node",
    "operation",
    "read_config",
    "rss",
    "secret_share",
    "sharing",
    "storage",
    "types",
]