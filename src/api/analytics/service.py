import random
from typing import Optional

from sqlalchemy.future import select

from src.api.analytics.aggregator import AnalyticsAggregator
from src.api.analytics.models import AnalyticsReportSchema
from src.config.settings import settings
from src.database.connection import AsyncSessionLocal
from src.database.models.product import Product
from src.database.models.product_interaction import ProductInteraction
from src.shared.error_handler import ErrorHandler, handle_service_errors
from src.shared.performance_utils import async_timer


class AnalyticsService:
    """
    Service behind the admin insights dashboard.

    Each call reads the full product catalog and interaction log and
    aggregates them in memory. Nothing is cached or persisted between calls.
    """

    def __init__(self):
        self._error_handler = ErrorHandler(__name__)
        self.logger = self._error_handler.logger

    async def load_snapshot(self):
        """Read all products and the (product_id, interaction_type) pairs of every interaction."""
        async with AsyncSessionLocal() as session:
            products_result = await session.execute(
                select(Product).order_by(Product.id)
            )
            products = list(products_result.scalars().all())

            interactions_result = await session.execute(
                select(
                    ProductInteraction.product_id,
                    ProductInteraction.interaction_type,
                )
            )
            interactions = list(interactions_result.all())

        return products, interactions

    @handle_service_errors("building analytics insights")
    @async_timer("get_insights")
    async def get_insights(
        self, simulate: Optional[bool] = None
    ) -> AnalyticsReportSchema:
        if simulate is None:
            simulate = settings.ANALYTICS_SIMULATE_MISSING_DATA

        products, interactions = await self.load_snapshot()
        self.logger.info(
            f"Processing {len(products)} products and {len(interactions)} interactions"
        )

        aggregator = AnalyticsAggregator(
            rng=random.Random(settings.ANALYTICS_RANDOM_SEED),
            simulate_missing=simulate,
        )
        return aggregator.build_report(products, interactions)
