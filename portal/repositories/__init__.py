"""
Persistence adapters.

These modules encapsulate how records are stored/retrieved (in memory, a JSON
file or SQL). Entity accessors depend on the StorageBackend interface rather
than touching a concrete store.
"""
