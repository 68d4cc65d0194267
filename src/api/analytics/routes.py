from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.api.analytics.models import AnalyticsReportSchema
from src.api.analytics.service import AnalyticsService
from src.config.constants import UserRole
from src.dependencies.auth import RoleChecker
from src.shared.responses import success_response

analytics_router = APIRouter(prefix="/ml-insights", tags=["Analytics"])
analytics_service = AnalyticsService()


@analytics_router.get(
    "/",
    summary="Get product performance, forecast and anomaly insights",
    response_model=AnalyticsReportSchema,
    dependencies=[Depends(RoleChecker([UserRole.ADMIN]))],
)
async def get_ml_insights(
    simulate: Optional[bool] = Query(
        None,
        description="Fill metrics without observed data with placeholder values "
        "(defaults to the ANALYTICS_SIMULATE_MISSING_DATA setting)",
    ),
):
    """
    Aggregate the full catalog and interaction log into the dashboard report.

    Rows whose metrics were not observed are flagged with `insufficientData`
    and list the affected fields in `simulatedFields`.
    """
    report = await analytics_service.get_insights(simulate=simulate)
    return success_response(report.model_dump(mode="json", by_alias=True))
