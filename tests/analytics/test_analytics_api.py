from decimal import Decimal
from types import SimpleNamespace
from unittest import mock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import SQLAlchemyError

from src.api.analytics.routes import analytics_service

PRODUCTS = [
    SimpleNamespace(
        id=1, name="Cloud Mattress", category="mattress",
        price=Decimal("400.00"), num_reviews=30,
    ),
    SimpleNamespace(
        id=2, name="Latex Pillow", category="pillow",
        price=Decimal("40.00"), num_reviews=4,
    ),
    SimpleNamespace(
        id=3, name="Bed Frame", category="furniture",
        price=Decimal("250.00"), num_reviews=0,
    ),
]
INTERACTIONS = (
    [SimpleNamespace(product_id=1, interaction_type="view")] * 600
    + [SimpleNamespace(product_id=1, interaction_type="add-to-cart")] * 45
    + [SimpleNamespace(product_id=2, interaction_type="view")] * 80
)


def mock_snapshot(**kwargs):
    return mock.patch.object(
        analytics_service, "load_snapshot", mock.AsyncMock(**kwargs)
    )


@pytest.mark.asyncio
class TestAnalyticsAPI:
    """Test suite for the admin insights endpoint, including RBAC."""

    async def test_admin_gets_report(self, admin_client: AsyncClient):
        with mock_snapshot(return_value=(PRODUCTS, INTERACTIONS)):
            response = await admin_client.get("/ml-insights/")

        assert response.status_code == 200
        body = response.json()
        assert body["statusCode"] == 200
        assert float(response.headers["X-Process-Time"]) >= 0
        data = body["data"]
        assert set(data) == {"performance", "forecast", "featureImportance", "anomalies"}
        assert len(data["performance"]) == 3
        assert len(data["featureImportance"]) == 4
        assert len(data["anomalies"]) == 2
        assert [f["day"] for f in data["forecast"]] == [30, 60, 90]

        mattress = data["performance"][0]
        assert mattress["views"] == 600
        assert mattress["adds"] == 45
        assert mattress["convRate"] == 5.0
        assert mattress["cluster"] == "Top Performer"
        assert mattress["insufficientData"] is False

        pillow = data["performance"][1]
        assert pillow["convRate"] == 5.0
        assert pillow["cluster"] == "Underperformer"
        assert "adds" in pillow["simulatedFields"]

    async def test_simulation_can_be_disabled_per_request(
        self, admin_client: AsyncClient
    ):
        with mock_snapshot(return_value=(PRODUCTS, INTERACTIONS)):
            response = await admin_client.get(
                "/ml-insights/", params={"simulate": "false"}
            )

        assert response.status_code == 200
        frame = response.json()["data"]["performance"][2]
        assert frame["views"] == 0
        assert frame["sales"] == 0
        assert frame["convRate"] == 0
        assert frame["margin"] is None
        assert frame["insufficientData"] is True
        assert frame["cluster"] == "Underperformer"

    async def test_customer_is_forbidden(self, customer_client: AsyncClient):
        with mock_snapshot(return_value=(PRODUCTS, INTERACTIONS)) as load:
            response = await customer_client.get("/ml-insights/")

        assert response.status_code == 403
        load.assert_not_called()

    async def test_anonymous_is_rejected(self, anonymous_client: AsyncClient):
        with mock_snapshot(return_value=(PRODUCTS, INTERACTIONS)) as load:
            response = await anonymous_client.get("/ml-insights/")

        assert response.status_code in (401, 403)
        load.assert_not_called()

    async def test_read_failure_is_generic_server_error(
        self, admin_client: AsyncClient
    ):
        with mock_snapshot(side_effect=SQLAlchemyError("connection refused")):
            response = await admin_client.get("/ml-insights/")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Internal Server Error"
        assert "connection refused" not in response.text
