import pytest

from dominionsim.rngs import RandomStreams
from dominionsim.seedsearch import LIMIT, find_value, main


def _stream_values(seed, n):
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)
    return [int(rng.random() * LIMIT) for _ in range(n)]


def test_finds_first_value():
    first = _stream_values(7, 1)[0]
    assert find_value(7, first) == 1


def test_finds_later_value():
    values = _stream_values(11, 3)
    assert find_value(11, values[2]) == 3


def test_uses_given_generator():
    rng = RandomStreams()
    target = _stream_values(5, 2)[1]
    assert find_value(5, target, rng) == 2
    assert rng.stream == 1


@pytest.mark.parametrize("target", [-1, LIMIT])
def test_rejects_unreachable_target(target):
    with pytest.raises(ValueError):
        find_value(1, target)


def test_main_found(capsys):
    target = _stream_values(9, 1)[0]
    assert main(["9", str(target)]) == 0
    assert capsys.readouterr().out == "Found the bug!\n"


def test_main_not_enough_inputs(capsys):
    assert main(["9"]) == 1
    assert capsys.readouterr().out == "Not enough inputs:  seed target\n"