"""Constants shared by the product handlers and services."""

# Fixed page size of GET /producto/page/{page}.
PRODUCT_PAGE_SIZE = 4

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 20

PRODUCT_CREATED_MESSAGE = "product created successfully"
PRODUCT_UPDATED_MESSAGE = "product updated successfully"
PRODUCT_DELETED_MESSAGE = "product deleted successfully"

PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
