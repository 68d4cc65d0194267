from datetime import datetime, timezone
from typing import Optional

from src.api.interactions.models import InteractionSchema
from src.config.constants import InteractionType
from src.database.connection import AsyncSessionLocal
from src.database.models.product import Product
from src.database.models.product_interaction import ProductInteraction
from src.shared.error_handler import ErrorHandler, handle_service_errors
from src.shared.exceptions import ResourceNotFoundException


class InteractionService:
    """
    Service for recording shopper interactions with products.

    Events are append-only; the insights report reads them back in full.
    """

    def __init__(self):
        self._error_handler = ErrorHandler(__name__)
        self.logger = self._error_handler.logger

    @handle_service_errors("tracking product interaction")
    async def track_interaction(
        self,
        product_id: int,
        interaction_type: InteractionType,
        user_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> InteractionSchema:
        """
        Record a single interaction.

        Args:
            product_id: Product the shopper acted on
            interaction_type: view, click, add-to-cart or purchase
            user_id: Firebase UID, None for guests
            session_id: Client session identifier, if any

        Raises:
            ResourceNotFoundException: the product does not exist
        """
        async with AsyncSessionLocal() as session:
            product = await session.get(Product, product_id)
            if not product:
                raise ResourceNotFoundException(
                    detail=f"Product with ID {product_id} not found"
                )

            interaction = ProductInteraction(
                product_id=product_id,
                user_id=user_id,
                interaction_type=interaction_type.value,
                timestamp=datetime.now(timezone.utc),
                session_id=session_id,
            )
            session.add(interaction)
            await session.commit()

            self.logger.debug(
                f"Tracked {interaction_type.value} interaction: user={user_id}, product={product_id}"
            )
            return InteractionSchema.model_validate(interaction)
