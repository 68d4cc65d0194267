import pytest
from sqlalchemy.exc import SQLAlchemyError

from src.shared.error_handler import ServiceError, handle_service_errors
from src.shared.exceptions import ForbiddenException


class FakeService:
    def __init__(self, error):
        self.error = error

    @handle_service_errors("doing work")
    async def run(self):
        if self.error:
            raise self.error
        return "done"


@pytest.mark.asyncio
async def test_success_passes_result_through():
    assert await FakeService(None).run() == "done"


@pytest.mark.asyncio
async def test_http_exceptions_pass_through():
    with pytest.raises(ForbiddenException):
        await FakeService(ForbiddenException()).run()


@pytest.mark.asyncio
async def test_database_errors_become_service_errors():
    original = SQLAlchemyError("boom")

    with pytest.raises(ServiceError) as exc_info:
        await FakeService(original).run()

    assert exc_info.value.message == "Database operation failed for doing work"
    assert exc_info.value.original_error is original


@pytest.mark.asyncio
async def test_unexpected_errors_become_service_errors():
    with pytest.raises(ServiceError) as exc_info:
        await FakeService(KeyError("missing")).run()

    assert exc_info.value.message == "Unexpected error during doing work"
