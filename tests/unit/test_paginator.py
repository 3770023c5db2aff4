from __future__ import annotations

from collections import OrderedDict

import pytest

from project_zero.application.exceptions import InvalidArgumentError, PageOutOfRangeError
from project_zero.pagination import (
    PagingMetadata,
    PagingStrategy,
    paginate,
    paginate_mapping,
)
from tests.conftest import expected_page_count, flatten


@pytest.mark.parametrize("total", [0, 1, 2, 7, 10, 11])
@pytest.mark.parametrize("size", [1, 3, 5, 10])
def test_pages_reconstruct_input(total, size):
    items = list(range(total))

    paginator = paginate(items, size)

    assert flatten(paginator) == items
    assert len(paginator.pages) == expected_page_count(total, size)
    assert all(len(page) == size for page in paginator.pages[:-1])
    if paginator.pages:
        assert len(paginator.pages[-1]) == (total % size or size)
    assert paginator.total_items_count == total
    assert paginator.limit == size


def test_five_items_in_pages_of_two(five_items):
    paginator = paginate(five_items, 2)

    assert paginator.pages == ((1, 2), (3, 4), (5,))


def test_default_last_page(five_items):
    result = paginate(five_items, 2).get_page(PagingStrategy.DEFAULT, 3)

    assert result.items == (5,)
    assert result.paging_metadata == PagingMetadata(
        size=1, current_page=3, next_page=None, total_items_count=5,
    )


def test_default_first_page_points_to_next(five_items):
    result = paginate(five_items, 2).get_page(PagingStrategy.DEFAULT, 1)

    assert result.items == (1, 2)
    assert result.paging_metadata.current_page == 1
    assert result.paging_metadata.next_page == 2
    assert result.paging_metadata.size == 2


def test_default_single_page_has_no_next():
    result = paginate([1, 2], 5).get_page(PagingStrategy.DEFAULT, 1)

    assert result.paging_metadata.next_page is None


@pytest.mark.parametrize("page_number", [0, -1, 4, 100])
def test_default_out_of_range(five_items, page_number):
    with pytest.raises(PageOutOfRangeError):
        paginate(five_items, 2).get_page(PagingStrategy.DEFAULT, page_number)


def test_cursor_bounds(five_items):
    paginator = paginate(five_items, 2)

    first = paginator.get_page(PagingStrategy.CURSOR, 0)
    last = paginator.get_page(PagingStrategy.CURSOR, 2)

    assert first.items == (1, 2)
    assert first.paging_metadata.current_page == 0
    assert first.paging_metadata.next_page == 1
    assert last.items == (5,)
    assert last.paging_metadata.next_page is None


@pytest.mark.parametrize("cursor", [-1, 3])
def test_cursor_out_of_range(five_items, cursor):
    with pytest.raises(PageOutOfRangeError):
        paginate(five_items, 2).get_page(PagingStrategy.CURSOR, cursor)


def test_upper_bound_message(five_items):
    with pytest.raises(PageOutOfRangeError) as exc_info:
        paginate(five_items, 2).get_page(PagingStrategy.DEFAULT, 4)

    assert exc_info.value.detail == (
        "[pagingStrategy = DEFAULT] - Requested page value: 4 is out of range!... "
        "(When totalItemsCount = 5 and requested limit = 2, "
        "then max allowable page value = 3)"
    )
    assert exc_info.value.bound == 3
    assert exc_info.value.limit == 2
    assert exc_info.value.total_items_count == 5


def test_lower_bound_message(five_items):
    with pytest.raises(PageOutOfRangeError) as exc_info:
        paginate(five_items, 2).get_page(PagingStrategy.CURSOR, -1)

    assert exc_info.value.detail == (
        "[pagingStrategy = CURSOR] - Requested cursor value: -1 is out of range!... "
        "(When totalItemsCount = 5 and requested limit = 2, "
        "then min allowable cursor value = 0)"
    )
    assert exc_info.value.strategy == "CURSOR"
    assert exc_info.value.page_number == -1


@pytest.mark.parametrize("strategy", list(PagingStrategy))
@pytest.mark.parametrize("page_number", [-5, 0, 1, 99, "abc", None])
def test_empty_input_returns_default(strategy, page_number):
    result = paginate([], 3).get_page(strategy, page_number)

    assert result.items == ()
    assert result.paging_metadata is PagingMetadata.DEFAULT_INSTANCE
    assert result.paging_metadata.total_items_count == 0


@pytest.mark.parametrize("raw", ["abc", "", "-1", "1.5", " 2", None])
def test_non_numeric_string_falls_back_to_start(five_items, raw):
    paginator = paginate(five_items, 2)

    assert paginator.get_page(PagingStrategy.DEFAULT, raw).paging_metadata.current_page == 1
    assert paginator.get_page(PagingStrategy.CURSOR, raw).paging_metadata.current_page == 0


def test_numeric_string_is_parsed(five_items):
    result = paginate(five_items, 2).get_page(PagingStrategy.DEFAULT, "2")

    assert result.items == (3, 4)


def test_numeric_string_still_validated(five_items):
    with pytest.raises(PageOutOfRangeError):
        paginate(five_items, 2).get_page(PagingStrategy.DEFAULT, "9")


@pytest.mark.parametrize("size", [0, -1, True, 2.0])
def test_invalid_size_rejected(five_items, size):
    with pytest.raises(InvalidArgumentError):
        paginate(five_items, size)
    with pytest.raises(InvalidArgumentError):
        paginate_mapping({"a": 1}, size)


def test_input_changes_do_not_leak_into_pages():
    items = [1, 2, 3]
    paginator = paginate(items, 2)

    items.append(4)

    assert flatten(paginator) == [1, 2, 3]


def test_mapping_pages_preserve_order():
    paginator = paginate_mapping({"a": 1, "b": 2, "c": 3}, 2)

    assert [dict(page) for page in paginator.pages] == [{"a": 1, "b": 2}, {"c": 3}]
    assert [list(page) for page in paginator.pages] == [["a", "b"], ["c"]]
    assert paginator.total_items_count == 3


def test_mapping_order_follows_iteration_order():
    source = OrderedDict([("z", 26), ("a", 1), ("m", 13)])

    result = paginate_mapping(source, 2).get_page(PagingStrategy.CURSOR, 0)

    assert list(result.items.items()) == [("z", 26), ("a", 1)]
    assert result.paging_metadata.next_page == 1


def test_mapping_pages_are_read_only():
    page = paginate_mapping({"a": 1}, 1).get_page(PagingStrategy.DEFAULT, 1).items

    with pytest.raises(TypeError):
        page["b"] = 2  # type: ignore[index]


def test_empty_mapping_returns_empty_default():
    result = paginate_mapping({}, 2).get_page(PagingStrategy.DEFAULT, 7)

    assert dict(result.items) == {}
    assert result.paging_metadata is PagingMetadata.DEFAULT_INSTANCE


@pytest.mark.parametrize("strategy", list(PagingStrategy))
def test_overlong_digit_string_is_out_of_range(five_items, strategy):
    with pytest.raises(PageOutOfRangeError) as exc_info:
        paginate(five_items, 2).get_page(strategy, "9" * 5000)

    assert "max allowable" in exc_info.value.detail


@pytest.mark.parametrize("flag", [True, False])
def test_bool_page_number_falls_back_to_start(five_items, flag):
    paginator = paginate(five_items, 2)

    assert paginator.get_page(PagingStrategy.DEFAULT, flag).paging_metadata.current_page == 1
    assert paginator.get_page(PagingStrategy.CURSOR, flag).paging_metadata.current_page == 0
