import math
import gpdemo.num as gnp
from gpdemo import kernel
from gpdemo.core import KernelParams, build_kernel_matrix, kernel_matrix, add_diag


def test_build_kernel_matrix_entries():
    a = [0.0, 0.5, 2.0]
    b = [-1.0, 1.0]
    K = build_kernel_matrix(a, b, 0.7, 1.3, kernel.matern52)
    assert K.shape == (3, 2)
    for i, ai in enumerate(a):
        for j, bj in enumerate(b):
            assert gnp.isclose(K[i, j], kernel.matern52(ai, bj, 0.7, 1.3))


def test_build_kernel_matrix_default_is_rbf():
    a = gnp.linspace(-1.0, 1.0, 4)
    K = build_kernel_matrix(a, a, 1.0, 1.0)
    assert gnp.allclose(K, build_kernel_matrix(a, a, 1.0, 1.0, kernel.rbf))


def test_kernel_matrix_symmetric():
    x = gnp.array([-2.1, -0.3, 0.0, 0.8, 1.9, 2.0])
    for name in kernel.list_kernels():
        K = kernel_matrix(x, x, KernelParams(kernel=name, length_scale=0.6, signal_variance=2.0))
        assert gnp.all(gnp.abs(K - K.T) <= 1e-9)
        assert gnp.all(gnp.diag(K) == 2.0)


def test_kernel_matrix_unknown_kernel():
    x = gnp.linspace(0.0, 1.0, 5)
    K_bad = kernel_matrix(x, x, {"kernel": "does-not-exist"})
    K_rbf = kernel_matrix(x, x, {"kernel": "rbf"})
    assert gnp.allclose(K_bad, K_rbf)


def test_kernel_matrix_empty_inputs():
    K = kernel_matrix([], [1.0, 2.0], KernelParams())
    assert K.shape == (0, 2)


def test_scalar_only_kernel():
    def constant(x1, x2, lengthscale, signal_variance):
        return signal_variance

    K = build_kernel_matrix([0.0, 1.0, 2.0], [0.0, 5.0], 1.0, 3.0, constant)
    assert K.shape == (3, 2)
    assert gnp.all(K == 3.0)


def test_scalar_kernels():
    def scalar_rbf(x1, x2, lengthscale, signal_variance):
        return signal_variance * math.exp(-((x1 - x2) ** 2) / (2 * lengthscale**2))

    def triangular(x1, x2, lengthscale, signal_variance):
        d = abs(x1 - x2) / lengthscale
        return signal_variance * (1.0 - d) if d < 1 else 0.0

    a = [0.0, 1.0, 2.0]
    b = [0.0, 5.0]
    K = build_kernel_matrix(a, b, 1.0, 1.0, scalar_rbf)
    assert K.shape == (3, 2)
    assert gnp.allclose(K, build_kernel_matrix(a, b, 1.0, 1.0, kernel.rbf))

    K = build_kernel_matrix(a, [0.0, 0.5, 5.0], 2.0, 3.0, triangular)
    assert gnp.allclose(K, [[3.0, 2.25, 0.0], [1.5, 2.25, 0.0], [0.0, 0.75, 0.0]])

    K = build_kernel_matrix([], b, 1.0, 1.0, triangular)
    assert K.shape == (0, 2)


def test_add_diag_does_not_mutate():
    M = gnp.array([[1.0, 0.5], [0.5, 1.0]])
    M2 = add_diag(M, 0.25)
    assert gnp.allclose(M, [[1.0, 0.5], [0.5, 1.0]])
    assert gnp.allclose(M2, [[1.25, 0.5], [0.5, 1.25]])


def run_all():
    test_build_kernel_matrix_entries()
    test_build_kernel_matrix_default_is_rbf()
    test_kernel_matrix_symmetric()
    test_kernel_matrix_unknown_kernel()
    test_kernel_matrix_empty_inputs()
    test_scalar_only_kernel()
    test_scalar_kernels()
    test_add_diag_does_not_mutate()
    print("All tests passed.")


if __name__ == "__main__":
    run_all()
