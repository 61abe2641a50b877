# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the catalog's business logic:
# - models/: Pydantic schemas for data validation
# - services/: Product operations against the backing file
#
# Routers call services; services never build HTTP responses themselves.
# =============================================================================
