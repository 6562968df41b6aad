import pytest

from optyshop_admin.schemas import ApiResponse, normalize_list

ROWS = [{"id": 1}, {"id": 2}]
PAGE = {"current_page": 1, "total_pages": 1, "total_items": 2, "items_per_page": 50}


@pytest.mark.parametrize("body", [
    ROWS,
    {"data": ROWS},
    {"success": True, "data": {"data": ROWS, "pagination": PAGE}},
    {"success": True, "data": {"lensColors": ROWS, "pagination": PAGE}},
    {"lensColors": ROWS},
])
def test_supported_list_shapes(body):
    page = normalize_list(body, "lensColors")
    assert page.data == ROWS


def test_pagination_is_kept_when_present():
    page = normalize_list({"data": {"data": ROWS, "pagination": PAGE}})
    assert page.pagination.total_items == 2


def test_list_key_of_another_resource_is_not_probed():
    assert normalize_list({"data": {"coupons": ROWS}}, "lensColors").data == []


@pytest.mark.parametrize("body", [None, "oops", {"data": "x"}, {"data": {"pagination": PAGE}}])
def test_unrecognised_bodies_are_empty_pages(body):
    page = normalize_list(body, "lensColors")
    assert page.data == []
    assert page.pagination is None


def test_malformed_pagination_is_dropped():
    page = normalize_list({"data": ROWS, "pagination": {"current_page": "x"}})
    assert page.data == ROWS
    assert page.pagination is None


def test_api_response_defaults():
    r = ApiResponse(data={"ok": True})
    assert r.status == 200
    assert r.simulated is False
