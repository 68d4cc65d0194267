import json
from types import SimpleNamespace
from unittest import mock

import pytest

from scripts.db import list_products as list_products_script
from scripts.db.list_products import serialize_products


def test_serialize_products_keeps_listed_fields_only():
    products = [
        SimpleNamespace(
            id=1,
            name="Cloud Mattress",
            category="mattress",
            image="https://cdn.example.com/cloud.jpg",
            description="Medium firm",
            price=400,
            num_reviews=12,
        )
    ]

    assert serialize_products(products) == [
        {
            "id": 1,
            "name": "Cloud Mattress",
            "category": "mattress",
            "image": "https://cdn.example.com/cloud.jpg",
            "description": "Medium firm",
        }
    ]


@pytest.mark.asyncio
async def test_main_frames_catalog_json(capsys):
    products = [{"id": 1, "name": "Cloud Mattress", "category": "mattress",
                 "image": None, "description": None}]

    with mock.patch.object(
        list_products_script, "list_products", mock.AsyncMock(return_value=products)
    ), mock.patch.object(list_products_script, "engine") as engine:
        engine.dispose = mock.AsyncMock()
        exit_code = await list_products_script.main()

    assert exit_code == 0
    engine.dispose.assert_awaited_once()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "PRODUCTS_START"
    assert lines[-1] == "PRODUCTS_END"
    assert json.loads("\n".join(lines[1:-1])) == products


@pytest.mark.asyncio
async def test_main_returns_non_zero_on_failure(capsys):
    with mock.patch.object(
        list_products_script,
        "list_products",
        mock.AsyncMock(side_effect=RuntimeError("connection refused")),
    ), mock.patch.object(list_products_script, "engine") as engine:
        engine.dispose = mock.AsyncMock()
        exit_code = await list_products_script.main()

    assert exit_code == 1
    engine.dispose.assert_awaited_once()
    captured = capsys.readouterr()
    assert "PRODUCTS_START" not in captured.out
    assert "connection refused" in captured.err
