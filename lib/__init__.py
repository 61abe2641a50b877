# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - json_store.py: Adapter for the JSON file that holds the catalog
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.json_store import JsonProductStore, JsonStoreError

__all__ = [
    "JsonProductStore",
    "JsonStoreError",
]
