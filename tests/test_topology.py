import pytest

from ppctasks.topology import (
    get_next,
    get_prev,
    in_route,
    route,
    send_data_linear,
)

SIZES = [2, 3, 4, 7]


@pytest.mark.parametrize("router", [True, False])
@pytest.mark.parametrize("rank", [0, 3, 10])
def test_next_and_prev_are_inverse(rank, router):
    assert get_prev(get_next(rank, router), router) == rank
    assert get_next(get_prev(rank, router), router) == rank


@pytest.mark.parametrize("rank", [0, 3, 10])
def test_directions_are_opposite(rank):
    assert get_next(rank, True) == get_prev(rank, False)
    assert get_next(rank, False) == get_prev(rank, True)


def test_in_route_ends_included():
    assert in_route(2, 2, 5, True)
    assert in_route(5, 2, 5, True)
    assert not in_route(6, 2, 5, True)
    assert in_route(2, 5, 2, False)
    assert not in_route(1, 5, 2, False)


def test_route_upwards():
    assert route(0, 3, 4) == [0, 1, 2, 3]


def test_route_downwards_is_reverse():
    assert route(3, 0, 4) == list(reversed(route(0, 3, 4)))


def test_route_empty_cases():
    assert route(2, 2, 4) == []
    assert route(0, 4, 4) == []


def test_route_errors():
    with pytest.raises(ValueError):
        route(-1, 2, 4)
    with pytest.raises(ValueError):
        route(0, 1, 0)


@pytest.mark.parametrize("size", SIZES)
def test_inc(size):
    received = send_data_linear(500, 0, size - 1, size)
    assert received[size - 1] == 500


@pytest.mark.parametrize("size", SIZES)
def test_dec(size):
    received = send_data_linear(500, size - 1, 0, size)
    assert received[0] == 500


def test_two_processors():
    assert send_data_linear(500, 0, 1, 2) == {1: 500}


@pytest.mark.parametrize("size", SIZES)
def test_middle_send_inc(size):
    sender = size // 2
    received = send_data_linear(500, sender, size - 1, size)
    if sender == size - 1:
        assert received == {}
    else:
        assert received[size - 1] == 500


@pytest.mark.parametrize("size", SIZES)
def test_middle_send_dec(size):
    sender = size // 2
    received = send_data_linear(500, sender, 0, size)
    assert received[0] == 500
    assert sorted(received) == list(range(0, sender))


def test_every_intermediate_rank_sees_data():
    received = send_data_linear("payload", 1, 5, 7)
    assert list(received) == route(1, 5, 7)[1:]
    assert set(received.values()) == {"payload"}


def test_no_transfer_out_of_range():
    assert send_data_linear(500, 0, 9, 4) == {}