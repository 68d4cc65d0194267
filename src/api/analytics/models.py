from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.config.constants import PerformanceCluster


class _CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductPerformanceSchema(_CamelSchema):
    """Per-product activity metrics and cluster label"""

    id: int = Field(..., examples=[12])
    name: str = Field(..., examples=["Memory Foam Mattress"])
    category: str = Field(..., examples=["mattress"])
    price: float = Field(..., examples=[499.0])
    views: int = Field(..., description="View events recorded for the product")
    adds: int = Field(..., description="Add-to-cart events recorded for the product")
    sales: int = Field(..., description="Sales proxy (review count)")
    conv_rate: float = Field(..., description="Sales per view as a percentage")
    margin: Optional[int] = Field(None, description="Synthetic margin percentage")
    return_rate: Optional[float] = Field(
        None, description="Synthetic return rate percentage"
    )
    cluster: PerformanceCluster
    simulated_fields: List[str] = Field(
        default_factory=list,
        description="Fields holding placeholder values instead of observed data",
    )
    insufficient_data: bool = Field(
        False,
        description="True when views, adds, sales or conversion rate had no observed data",
    )


class ForecastPointSchema(_CamelSchema):
    day: int = Field(..., examples=[30])
    revenue: int = Field(..., examples=[56000])
    inventory_needed: int = Field(..., examples=[10])


class FeatureImportanceSchema(_CamelSchema):
    feature: str
    importance: int


class AnomalySchema(_CamelSchema):
    product: str
    type: str
    message: str
    severity: str


class AnalyticsReportSchema(_CamelSchema):
    """Report rendered by the admin insights dashboard"""

    performance: List[ProductPerformanceSchema] = Field(default_factory=list)
    forecast: List[ForecastPointSchema] = Field(default_factory=list)
    feature_importance: List[FeatureImportanceSchema] = Field(default_factory=list)
    anomalies: List[AnomalySchema] = Field(default_factory=list)
