import math
import unittest
import gpdemo.num as gnp
from gpdemo import kernel
from gpdemo.kernel import rbf, matern12, matern32, matern52, KernelName

ALL_KERNELS = [rbf, matern12, matern32, matern52]


class TestKernelValues(unittest.TestCase):
    def test_rbf_value(self):
        self.assertAlmostEqual(float(rbf(0.0, 1.0, 1.0, 1.0)), math.exp(-0.5))
        self.assertAlmostEqual(float(rbf(1.0, 3.0, 2.0, 0.5)), 0.5 * math.exp(-0.5))

    def test_matern12_value(self):
        self.assertAlmostEqual(float(matern12(0.0, 2.0, 1.0, 2.0)), 2.0 * math.exp(-2.0))

    def test_matern32_value(self):
        s3 = math.sqrt(3.0)
        self.assertAlmostEqual(
            float(matern32(0.0, 1.0, 1.0, 1.0)), (1.0 + s3) * math.exp(-s3)
        )

    def test_matern52_value(self):
        r = 1.5 / 0.5
        s5 = math.sqrt(5.0)
        expected = 3.0 * (1.0 + s5 * r + 5.0 * r * r / 3.0) * math.exp(-s5 * r)
        self.assertAlmostEqual(float(matern52(-0.5, 1.0, 0.5, 3.0)), expected)

    def test_value_at_zero_distance_is_signal_variance(self):
        for k in ALL_KERNELS:
            for x in [-2.5, 0.0, 0.3, 7.0]:
                for s2 in [0.1, 1.0, 2.7]:
                    self.assertEqual(float(k(x, x, 0.7, s2)), s2, msg=k.__name__)

    def test_symmetry(self):
        pairs = [(0.0, 1.3), (-2.0, 0.4), (5.0, 5.5)]
        for k in ALL_KERNELS:
            for a, b in pairs:
                self.assertAlmostEqual(
                    float(k(a, b, 0.8, 1.4)), float(k(b, a, 0.8, 1.4)), places=12
                )

    def test_decreasing_with_distance(self):
        h = gnp.linspace(0.0, 4.0, 41)
        for k in ALL_KERNELS:
            values = k(h, 0.0, 1.0, 1.0)
            self.assertTrue(gnp.all(values[1:] < values[:-1]), msg=k.__name__)

    def test_broadcasting(self):
        a = gnp.linspace(-1.0, 1.0, 3)
        b = gnp.linspace(0.0, 2.0, 4)
        K = matern32(a[:, None], b[None, :], 1.0, 1.0)
        self.assertEqual(K.shape, (3, 4))
        self.assertAlmostEqual(float(K[2, 1]), float(matern32(1.0, 2.0 / 3.0, 1.0, 1.0)))

    def test_unit_kernels(self):
        self.assertEqual(float(kernel.squared_exponential_kernel(0.0)), 1.0)
        self.assertEqual(float(kernel.exponential_kernel(0.0)), 1.0)
        self.assertEqual(float(kernel.matern32_kernel(0.0)), 1.0)
        self.assertEqual(float(kernel.matern52_kernel(0.0)), 1.0)
        self.assertAlmostEqual(float(kernel.exponential_kernel(1.0)), math.exp(-1.0))


class TestKernelRegistry(unittest.TestCase):
    def test_lookup(self):
        self.assertIs(kernel.get_kernel("rbf"), rbf)
        self.assertIs(kernel.get_kernel("matern12"), matern12)
        self.assertIs(kernel.get_kernel("matern32"), matern32)
        self.assertIs(kernel.get_kernel("matern52"), matern52)

    def test_lookup_with_enum(self):
        self.assertIs(kernel.get_kernel(KernelName.MATERN52), matern52)
        self.assertEqual(KernelName.MATERN12, "matern12")

    def test_unknown_name_falls_back_to_rbf(self):
        for name in ["gaussian", "RBF", "", None, "matern72"]:
            self.assertIs(kernel.get_kernel(name), rbf)

    def test_evaluate(self):
        self.assertEqual(
            float(kernel.evaluate("matern32", 0.1, 0.9, 0.5, 2.0)),
            float(matern32(0.1, 0.9, 0.5, 2.0)),
        )
        self.assertEqual(
            float(kernel.evaluate("no-such-kernel", 0.1, 0.9, 0.5, 2.0)),
            float(rbf(0.1, 0.9, 0.5, 2.0)),
        )

    def test_registry_contents(self):
        self.assertEqual(
            kernel.list_kernels(), ["rbf", "matern52", "matern32", "matern12"]
        )
        self.assertEqual(set(kernel.KERNEL_FNS), set(kernel.KERNELS))
        self.assertEqual(kernel.describe("matern32").name, "Matérn 3/2")
        self.assertEqual(kernel.describe("bogus").name, "RBF (Squared Exponential)")
        for info in kernel.KERNELS.values():
            self.assertTrue(callable(info.fn))
            self.assertTrue(info.description)


if __name__ == "__main__":
    unittest.main()
