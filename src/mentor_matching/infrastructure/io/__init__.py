"""IO adapters: local filesystem, HTTP and payload validation."""
