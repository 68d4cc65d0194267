from unittest import mock

import pytest

from src.api.interactions.service import InteractionService
from src.config.constants import InteractionType
from src.database.models.product import Product
from src.database.models.product_interaction import ProductInteraction
from src.shared.exceptions import ResourceNotFoundException


def fake_session_factory(product):
    session = mock.AsyncMock()
    session.get.return_value = product

    def assign_id(obj):
        obj.id = 77

    session.add = mock.MagicMock(side_effect=assign_id)
    factory = mock.MagicMock()
    factory.return_value.__aenter__.return_value = session
    return factory, session


@pytest.mark.asyncio
async def test_track_interaction_persists_event():
    factory, session = fake_session_factory(Product(id=5, name="Duvet", price=0))

    with mock.patch("src.api.interactions.service.AsyncSessionLocal", factory):
        result = await InteractionService().track_interaction(
            product_id=5,
            interaction_type=InteractionType.PURCHASE,
            user_id="uid-1",
            session_id="sess-9",
        )

    stored = session.add.call_args.args[0]
    assert isinstance(stored, ProductInteraction)
    assert stored.interaction_type == "purchase"
    assert stored.timestamp.tzinfo is not None
    session.commit.assert_awaited_once()

    assert result.id == 77
    assert result.product_id == 5
    assert result.user_id == "uid-1"
    assert result.session_id == "sess-9"
    assert result.interaction_type == InteractionType.PURCHASE


@pytest.mark.asyncio
async def test_track_interaction_requires_existing_product():
    factory, session = fake_session_factory(None)

    with mock.patch("src.api.interactions.service.AsyncSessionLocal", factory):
        with pytest.raises(ResourceNotFoundException):
            await InteractionService().track_interaction(
                product_id=404, interaction_type=InteractionType.VIEW
            )

    session.add.assert_not_called()
    session.commit.assert_not_called()
