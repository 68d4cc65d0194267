from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Request, status

from src.api.auth.models import DecodedToken
from src.api.interactions.models import CreateInteractionSchema, InteractionSchema
from src.api.interactions.service import InteractionService
from src.config.settings import settings
from src.dependencies.auth import get_optional_user
from src.middleware.rate_limit import limiter
from src.shared.responses import success_response

interactions_router = APIRouter(prefix="/interactions", tags=["Interactions"])
interaction_service = InteractionService()


@interactions_router.post(
    "/",
    summary="Record a shopper interaction with a product",
    response_model=InteractionSchema,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(settings.INTERACTIONS_RATE_LIMIT)
async def track_interaction(
    request: Request,
    payload: CreateInteractionSchema,
    current_user: Annotated[Optional[DecodedToken], Depends(get_optional_user)],
):
    """
    Log a view, click, add-to-cart or purchase event.

    Authentication is optional: guest events are stored without a user.
    """
    interaction = await interaction_service.track_interaction(
        product_id=payload.product_id,
        interaction_type=payload.interaction_type,
        user_id=current_user.uid if current_user else None,
        session_id=payload.session_id,
    )
    return success_response(
        interaction.model_dump(mode="json"), status_code=status.HTTP_201_CREATED
    )
