import unittest
import matplotlib.pyplot as plt
from examples import (
    gpdemo_example01_kernels,
    gpdemo_example02_posterior,
    gpdemo_example03_sample_paths,
    gpdemo_example04_interactive,
    )


class TestExamples(unittest.TestCase):
    def tearDown(self):
        plt.close("all")

    def test_01(self):
        gpdemo_example01_kernels.main()

    def test_02(self):
        gpdemo_example02_posterior.main()

    def test_03(self):
        gpdemo_example03_sample_paths.main()

    def test_04(self):
        app = gpdemo_example04_interactive.main()
        self.assertEqual(len(app.points), 3)
        self.assertIsNotNone(app.posterior)


if __name__ == "__main__":
    unittest.main()
