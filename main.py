from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.analytics.routes import analytics_router
from src.api.interactions.routes import interactions_router
from src.middleware.error import http_exception_handler
from src.middleware.rate_limit import limiter
from src.middleware.timing import add_process_time_header
from src.shared.utils import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Storefront Insights API",
    description="Interaction tracking and admin analytics for the storefront.",
    version="1.0.0",
)

app.state.limiter = limiter

app.include_router(analytics_router)
app.include_router(interactions_router)

app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, http_exception_handler)


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Storefront Insights API",
        version="1.0.0",
        description="Interaction tracking and admin analytics for the storefront.",
        routes=app.routes,
    )
    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "BearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
    }
    openapi_schema["security"] = [{"BearerAuth": []}]
    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


app.middleware("http")(add_process_time_header)


@app.get("/", tags=["App"])
async def read_root():
    return {"status": "ok"}
