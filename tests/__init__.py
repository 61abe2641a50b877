# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Product Catalog API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_json_store.py: Tests for the backing file adapter
# - test_product_service.py: Tests for catalog business logic
# - test_products_api.py: End-to-end tests for the /products endpoints
# - test_health.py: Health and root endpoint tests
# - test_seed_products.py: Tests for the sample catalog script
#
# Run tests with: pytest
# =============================================================================
