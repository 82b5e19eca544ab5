import logging
import numpy as np
import gpdemo.num as gnp
from gpdemo.core import linalg


def random_spd(n, seed=0):
    rng = np.random.default_rng(seed)
    A = rng.standard_normal((n, n))
    return A @ A.T + n * np.eye(n)


def test_cholesky_round_trip():
    for n in [1, 2, 5, 20]:
        M = random_spd(n, seed=n)
        L = linalg.cholesky(M)
        assert L.shape == (n, n)
        assert gnp.allclose(L, gnp.tril(L))
        assert gnp.allclose(linalg.mat_mul(L, linalg.transpose(L)), M, atol=1e-6)
        assert gnp.allclose(L, np.linalg.cholesky(M))


def test_cholesky_does_not_modify_input():
    M = random_spd(4)
    M_copy = M.copy()
    linalg.cholesky(M)
    assert gnp.allclose(M, M_copy)


def test_cholesky_indefinite_gives_nan(caplog):
    M = gnp.array([[1.0, 2.0], [2.0, 1.0]])
    with caplog.at_level(logging.WARNING, logger="gpdemo"):
        L = linalg.cholesky(M)
    assert L[0, 0] == 1.0
    assert gnp.isnan(L[1, 1])
    assert "not positive definite" in caplog.text


def test_cholesky_empty():
    L = linalg.cholesky(gnp.zeros((0, 0)))
    assert L.shape == (0, 0)


def test_solve_l():
    M = random_spd(6, seed=3)
    L = linalg.cholesky(M)
    b = np.arange(6.0)
    z = linalg.solve_l(L, b)
    assert gnp.allclose(linalg.mat_vec(L, z), b)


def test_solve_l_columns():
    M = random_spd(5, seed=4)
    L = linalg.cholesky(M)
    B = np.random.default_rng(1).standard_normal((5, 3))
    Z = linalg.solve_l(L, B)
    assert Z.shape == (5, 3)
    for j in range(3):
        assert gnp.allclose(Z[:, j], linalg.solve_l(L, B[:, j]))


def test_cholesky_solve():
    M = random_spd(7, seed=5)
    L = linalg.cholesky(M)
    b = np.linspace(-1.0, 1.0, 7)
    x = linalg.cholesky_solve(L, b)
    assert gnp.allclose(linalg.mat_vec(M, x), b)
    assert gnp.allclose(x, np.linalg.solve(M, b))


def test_solve_propagates_nan():
    L = gnp.array([[1.0, 0.0], [gnp.nan, gnp.nan]])
    z = linalg.solve_l(L, gnp.array([1.0, 1.0]))
    assert z[0] == 1.0
    assert gnp.isnan(z[1])


def test_dense_helpers():
    A = gnp.array([[1.0, 2.0], [3.0, 4.0]])
    assert gnp.allclose(linalg.transpose(A), [[1.0, 3.0], [2.0, 4.0]])
    assert gnp.allclose(linalg.mat_vec(A, [1.0, 1.0]), [3.0, 7.0])
    assert gnp.allclose(linalg.mat_mul(A, gnp.eye(2)), A)
    assert gnp.allclose(linalg.full(3, 2.5), [2.5, 2.5, 2.5])
    x = linalg.linspace(-3.0, 3.0, 7)
    assert gnp.allclose(x, [-3.0, -2.0, -1.0, 0.0, 1.0, 2.0, 3.0])


def test_randn():
    z = linalg.randn(4, 3)
    assert z.shape == (4, 3)
    r1 = linalg.randn(5, rng=gnp.default_rng(42))
    r2 = linalg.randn(5, rng=gnp.default_rng(42))
    assert gnp.allclose(r1, r2)


def test_randn_statistics():
    z = linalg.randn(200000, rng=gnp.default_rng(7))
    assert abs(gnp.mean(z)) < 0.01
    assert abs(gnp.var(z) - 1.0) < 0.02


def test_set_seed():
    gnp.set_seed(123)
    a = gnp.randn(3)
    gnp.set_seed(123)
    b = gnp.randn(3)
    assert gnp.allclose(a, b)


def run_all():
    test_cholesky_round_trip()
    test_cholesky_does_not_modify_input()
    test_cholesky_empty()
    test_solve_l()
    test_solve_l_columns()
    test_cholesky_solve()
    test_solve_propagates_nan()
    test_dense_helpers()
    test_randn()
    test_randn_statistics()
    test_set_seed()
    print("All tests passed.")


if __name__ == "__main__":
    run_all()
