import pytest

from stdext.execute import execute, execute_async


def _total(data):
    return sum(data)


def _add_offset(data, offset):
    return sum(x + offset for x in data)


async def _async_add_offset(data, offset):
    return sum(x + offset for x in data)


async def _async_total(data):
    return sum(data)


def test_execute_single_argument():
    assert execute(_total, [1, 2, 3]) == 6


def test_execute_with_extra_argument():
    assert execute(_add_offset, [1, 2, 3], 10) == 36


def test_execute_propagates_errors():
    with pytest.raises(TypeError):
        execute(_add_offset, [1, 2, 3])


@pytest.mark.asyncio
async def test_execute_async_with_extra_argument():
    assert await execute_async(_async_add_offset, [1, 2, 3], 1) == 9


@pytest.mark.asyncio
async def test_execute_async_single_argument():
    assert await execute_async(_async_total, [4, 5]) == 9