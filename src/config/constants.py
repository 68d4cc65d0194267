from enum import Enum


class UserRole(str, Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


class InteractionType(str, Enum):
    VIEW = "view"
    CLICK = "click"
    CART_ADD = "add-to-cart"
    PURCHASE = "purchase"


class PerformanceCluster(str, Enum):
    TOP_PERFORMER = "Top Performer"
    STEADY = "Steady"
    UNDERPERFORMER = "Underperformer"


# Product defaults used when a catalog row is incomplete
DEFAULT_PRODUCT_NAME = "Unknown Product"
DEFAULT_PRODUCT_CATEGORY = "other"

# Clustering thresholds
TOP_PERFORMER_MIN_SALES = 20  # strictly greater than
TOP_PERFORMER_MIN_CONV_RATE = 3.0  # strictly greater than
UNDERPERFORMER_MAX_SALES = 10  # strictly less than

# Forecast
FORECAST_DEFAULT_BASELINE = 50000
# (day, revenue multiplier, inventory offset, inventory floor)
FORECAST_HORIZONS = [
    (30, 1.12, 0, 10),
    (60, 1.25, 5, 15),
    (90, 1.45, 10, 20),
]

# Static feature importance table shown on the insights dashboard
FEATURE_IMPORTANCE = [
    ("Price Sensitive", 85),
    ("Firmness Level", 72),
    ("Material Quality", 68),
    ("Size Variety", 45),
]

# Anomalies
ANOMALY_SAMPLE_SIZE = 2
ANOMALY_TYPE = "Spike"
ANOMALY_SEVERITY = "Low"
ANOMALY_MESSAGE_TEMPLATE = "Trend detected: 15% increase in interest for {name}"

# Placeholder ranges for products without observed activity.
# Integer ranges are inclusive on both ends, float ranges are [low, high).
PLACEHOLDER_VIEWS_RANGE = (100, 599)
PLACEHOLDER_ADDS_RANGE = (10, 59)
PLACEHOLDER_SALES_RANGE = (5, 34)
PLACEHOLDER_CONV_RATE_RANGE = (1.0, 6.0)
PLACEHOLDER_MARGIN_RANGE = (15, 34)
PLACEHOLDER_RETURN_RATE_RANGE = (0.0, 3.0)
