# Headless matplotlib for the test-suite and the example smoke tests
import matplotlib

matplotlib.use("Agg")
