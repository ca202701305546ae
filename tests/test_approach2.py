import io

import pytest

from code_challenges.scalar_products import approach1
from code_challenges.scalar_products.approach2 import (
    Modulo,
    SymmMatrix2x2,
    Vector2,
    main,
    run,
)


def test_case1():
    assert run(4, 5, 3) == 2


def test_case2():
    assert run(1, 100, 1000) == 50


def test_case_heavy_1():
    assert run(991, 11495481, 112259) == 224515


@pytest.mark.parametrize("n", [0, 1])
def test_too_few_vectors_gives_no_products(n):
    assert run(4, 5, n) == 0


def test_negative_n_rejected():
    with pytest.raises(ValueError):
        run(4, 5, -2)


@pytest.mark.parametrize(
    "c, m, n",
    [(4, 5, 3), (2, 7, 10), (3, 11, 25), (5, 13, 40), (1, 97, 60), (6, 8, 17)],
)
def test_agrees_with_direct_approach(c, m, n):
    assert run(c, m, n) == approach1.run(c, m, n)


def test_modulo_add_and_mul():
    assert Modulo(3, 5) + Modulo(4, 5) == Modulo(2, 5)
    assert Modulo(3, 5) * Modulo(4, 5) == Modulo(2, 5)


def test_modulo_remainder_keeps_sign():
    assert (Modulo(-7, 5) + Modulo(0, 5)).value == -2
    assert (Modulo(-3, 5) * Modulo(4, 5)).value == -2


def test_modulo_str_and_repr():
    value = Modulo(3, 7)
    assert str(value) == "3 (mod 7)"
    assert repr(value) == "3 (mod 7)"


def test_inner_product():
    u = Vector2(Modulo(2, 7), Modulo(3, 7))
    v = Vector2(Modulo(4, 7), Modulo(5, 7))
    assert Vector2.inner_product(u, v) == Modulo(23 % 7, 7)


def test_pow2_of_fibonacci_matrix():
    zero, one = Modulo(0, 100), Modulo(1, 100)
    f = SymmMatrix2x2(zero, one, one)
    g = f.pow2()
    assert (g.a.value, g.b.value, g.d.value) == (1, 1, 2)
    g2 = g.pow2()
    assert (g2.a.value, g2.b.value, g2.d.value) == (2, 3, 5)


def test_mul_vector():
    m = 100
    g = SymmMatrix2x2(Modulo(1, m), Modulo(1, m), Modulo(2, m))
    v = Vector2(Modulo(0, m), Modulo(4, m))
    result = g.mul_vector(v)
    assert (result.first.value, result.second.value) == (4, 8)


def test_matrix_add():
    m = 10
    left = SymmMatrix2x2(Modulo(1, m), Modulo(6, m), Modulo(9, m))
    right = SymmMatrix2x2(Modulo(2, m), Modulo(7, m), Modulo(3, m))
    total = left + right
    assert (total.a.value, total.b.value, total.d.value) == (3, 3, 2)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 5 3\n"))
    assert main() == 0
    assert capsys.readouterr().out == "2\n"


def test_main_with_arguments(capsys):
    assert main(["1", "100", "1000"]) == 0
    assert capsys.readouterr().out == "50\n"


def test_main_rejects_negative_n(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 5 -3\n"))
    with pytest.raises(ValueError):
        main()