import math

import pytest

from algokit.numeric import (
    fibonacci,
    fibonacci_iterative,
    hailstone,
    hanoi_moves,
    integral,
    main,
)


def test_fibonacci_first_terms():
    assert fibonacci(0) == 1
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 20))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("n", range(0, 20))
def test_fibonacci_versions_agree(n):
    assert fibonacci_iterative(n) == fibonacci(n)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)
    with pytest.raises(ValueError):
        fibonacci_iterative(-1)


def test_hailstone_of_one():
    assert hailstone(1) == [1]


@pytest.mark.parametrize("n", [2, 3, 7, 27, 97])
def test_hailstone_steps(n):
    seq = hailstone(n)
    assert seq[0] == n
    assert seq[-1] == 1 or len(seq) == 100
    for prev, nxt in zip(seq, seq[1:]):
        assert nxt == (prev // 2 if prev % 2 == 0 else 3 * prev + 1)


def test_hailstone_limit_truncates():
    seq = hailstone(27, 10)
    assert len(seq) == 10
    assert seq == hailstone(27)[:10]


def test_hailstone_bad_limit():
    with pytest.raises(ValueError):
        hailstone(5, 0)


@pytest.mark.parametrize("n", range(0, 7))
def test_hanoi_moves_are_legal(n):
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    moves = list(hanoi_moves(n))
    for disk, src, dst in moves:
        assert pegs[src][-1] == disk
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(pegs[src].pop())
    assert pegs["C"] == list(range(n, 0, -1))
    assert len(moves) == 2**n - 1


def test_hanoi_custom_pegs():
    moves = list(hanoi_moves(1, "x", "y", "z"))
    assert moves == [(1, "x", "z")]


def test_integral_sin():
    assert integral(0, math.pi, math.sin, 1000) == pytest.approx(2.0, abs=1e-4)


def test_integral_linear_is_exact():
    assert integral(0, 2, lambda x: x, 7) == pytest.approx(2.0)


def test_integral_bad_n():
    with pytest.raises(ValueError):
        integral(0, 1, math.sin, 0)


def test_main_hailstone(capsys):
    assert main(["hailstone", "6"]) == 0
    assert capsys.readouterr().out.strip() == " ".join(str(x) for x in hailstone(6))


def test_main_hanoi_count(capsys):
    assert main(["hanoi", "3"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[-1] == str(len(lines) - 1)
    assert lines[0].startswith("Move disk-1 : A to ")