from prometheus_client import Counter

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)

FAVORITE_OPERATIONS = Counter(
    "favorite_operations_total",
    "Total number of favorite add/remove operations",
    ["action", "result"],
)

PRODUCT_SEARCHES = Counter("product_searches_total", "Total number of catalog search queries")
