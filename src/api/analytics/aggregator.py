"""
In-memory aggregation behind the admin insights report.

Counts interaction events per product, derives conversion rates and
performance clusters, and assembles the forecast, feature-importance and
anomaly sections. Nothing here touches the database; callers pass the full
product and interaction collections.
"""
import math
import random
from collections import Counter
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from src.api.analytics.models import (
    AnalyticsReportSchema,
    AnomalySchema,
    FeatureImportanceSchema,
    ForecastPointSchema,
    ProductPerformanceSchema,
)
from src.config.constants import (
    ANOMALY_MESSAGE_TEMPLATE,
    ANOMALY_SAMPLE_SIZE,
    ANOMALY_SEVERITY,
    ANOMALY_TYPE,
    DEFAULT_PRODUCT_CATEGORY,
    DEFAULT_PRODUCT_NAME,
    FEATURE_IMPORTANCE,
    FORECAST_DEFAULT_BASELINE,
    FORECAST_HORIZONS,
    PLACEHOLDER_ADDS_RANGE,
    PLACEHOLDER_CONV_RATE_RANGE,
    PLACEHOLDER_MARGIN_RANGE,
    PLACEHOLDER_RETURN_RATE_RANGE,
    PLACEHOLDER_SALES_RANGE,
    PLACEHOLDER_VIEWS_RANGE,
    TOP_PERFORMER_MIN_CONV_RATE,
    TOP_PERFORMER_MIN_SALES,
    UNDERPERFORMER_MAX_SALES,
    InteractionType,
    PerformanceCluster,
)
from src.shared.utils import get_logger

logger = get_logger(__name__)


def conversion_rate(sales: int, views: int) -> float:
    """Sales per view as a percentage, rounded to 2 decimals. 0 when there are no views."""
    if views <= 0:
        return 0.0
    return round((sales / views) * 100, 2)


def classify_performance(sales: int, conv_rate: float) -> PerformanceCluster:
    cluster = PerformanceCluster.STEADY
    if sales > TOP_PERFORMER_MIN_SALES and conv_rate > TOP_PERFORMER_MIN_CONV_RATE:
        cluster = PerformanceCluster.TOP_PERFORMER
    # Low sales wins over a high conversion rate
    if sales < UNDERPERFORMER_MAX_SALES:
        cluster = PerformanceCluster.UNDERPERFORMER
    return cluster


def build_forecast(
    performance: Sequence[ProductPerformanceSchema], product_count: int
) -> List[ForecastPointSchema]:
    baseline = sum(p.sales * p.price for p in performance) or FORECAST_DEFAULT_BASELINE
    return [
        ForecastPointSchema(
            day=day,
            revenue=math.floor(baseline * multiplier),
            inventory_needed=max(product_count + offset, floor),
        )
        for day, multiplier, offset, floor in FORECAST_HORIZONS
    ]


def feature_importance_table() -> List[FeatureImportanceSchema]:
    return [
        FeatureImportanceSchema(feature=feature, importance=importance)
        for feature, importance in FEATURE_IMPORTANCE
    ]


def detect_anomalies(products: Sequence[Any]) -> List[AnomalySchema]:
    # Fixed sample of the first products in catalog order, not a detection pass
    anomalies = []
    for product in products[:ANOMALY_SAMPLE_SIZE]:
        name = getattr(product, "name", None) or DEFAULT_PRODUCT_NAME
        anomalies.append(
            AnomalySchema(
                product=name,
                type=ANOMALY_TYPE,
                message=ANOMALY_MESSAGE_TEMPLATE.format(name=name),
                severity=ANOMALY_SEVERITY,
            )
        )
    return anomalies


class AnalyticsAggregator:
    """
    Builds the insights report from products and interaction events.

    Products are any objects exposing ``id``, ``name``, ``category``, ``price``
    and ``num_reviews``; events expose ``product_id`` and ``interaction_type``.

    With ``simulate_missing`` on, metrics with no observed data are filled
    with placeholder values drawn from ``rng``. Either way each row lists the
    affected fields in ``simulated_fields`` and sets ``insufficient_data``.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        simulate_missing: bool = True,
    ):
        self.rng = rng or random.Random()
        self.simulate_missing = simulate_missing

    def build_report(
        self, products: Sequence[Any], interactions: Iterable[Any]
    ) -> AnalyticsReportSchema:
        counts = self._count_interactions(interactions)

        performance = []
        for product in products:
            if product is None or getattr(product, "id", None) is None:
                continue
            performance.append(self._product_performance(product, counts))

        return AnalyticsReportSchema(
            performance=performance,
            forecast=build_forecast(performance, len(products)),
            feature_importance=feature_importance_table(),
            anomalies=detect_anomalies(products),
        )

    @staticmethod
    def _count_interactions(interactions: Iterable[Any]) -> Counter:
        counts: Counter = Counter()
        for interaction in interactions:
            product_id = getattr(interaction, "product_id", None)
            if product_id is None:
                continue
            interaction_type = getattr(interaction, "interaction_type", None)
            if isinstance(interaction_type, InteractionType):
                interaction_type = interaction_type.value
            counts[(product_id, interaction_type)] += 1
        return counts

    def _product_performance(
        self, product: Any, counts: Counter
    ) -> ProductPerformanceSchema:
        views = counts[(product.id, InteractionType.VIEW.value)]
        adds = counts[(product.id, InteractionType.CART_ADD.value)]
        sales = product.num_reviews or 0
        conv_rate = conversion_rate(sales, views)

        simulated = []
        # A product with real views but no sales keeps its 0% conversion
        if views == 0:
            simulated.extend(["views", "conv_rate"])
            if self.simulate_missing:
                views = self.rng.randint(*PLACEHOLDER_VIEWS_RANGE)
                conv_rate = self._uniform(PLACEHOLDER_CONV_RATE_RANGE)
        if adds == 0:
            simulated.append("adds")
            if self.simulate_missing:
                adds = self.rng.randint(*PLACEHOLDER_ADDS_RANGE)
        if sales == 0:
            simulated.append("sales")
            if self.simulate_missing:
                sales = self.rng.randint(*PLACEHOLDER_SALES_RANGE)

        insufficient_data = bool(simulated)

        margin = None
        return_rate = None
        if self.simulate_missing:
            margin = self.rng.randint(*PLACEHOLDER_MARGIN_RANGE)
            return_rate = self._uniform(PLACEHOLDER_RETURN_RATE_RANGE)
            simulated.extend(["margin", "return_rate"])

        if insufficient_data:
            logger.debug(
                f"Product {product.id} has no observed data for: {', '.join(simulated)}"
            )

        return ProductPerformanceSchema(
            id=product.id,
            name=product.name or DEFAULT_PRODUCT_NAME,
            category=product.category or DEFAULT_PRODUCT_CATEGORY,
            price=float(product.price or 0),
            views=views,
            adds=adds,
            sales=sales,
            conv_rate=conv_rate,
            margin=margin,
            return_rate=return_rate,
            cluster=classify_performance(sales, conv_rate),
            simulated_fields=simulated,
            insufficient_data=insufficient_data,
        )

    def _uniform(self, bounds: Tuple[float, float]) -> float:
        low, high = bounds
        return round(low + self.rng.random() * (high - low), 2)
