from unittest import TestCase

from .scalar_tst_functions import cubic, golden, golden_root, quadratic


# ======================================================================

class TestNewtonRoot(TestCase):
    def test_newton_root(self):
        from pycalc.numeric.solve import newton_root

        precision = 1e-12
        for f, x0, exact in ((quadratic, 1.0, 2.0),
                             (quadratic, -2.0, -3.0),
                             (cubic, 0.5, 1.0),
                             (cubic, 2.2, 2.0),
                             (cubic, 4.0, 3.0),
                             (golden, 1.0, golden_root)):
            x = newton_root(f, x0, precision)
            self.assertLessEqual(abs(f(x)), precision)
            self.assertAlmostEqual(x, exact, places=11)

    def test_already_converged(self):
        from pycalc.numeric.solve import newton_root

        self.assertEqual(newton_root(quadratic, 2.0), 2.0)
        self.assertEqual(newton_root(cubic, 3.0), 3.0)

    def test_failure_to_converge(self):
        from pycalc.numeric.solve import SolverError, newton_root

        # Iteration limit.
        with self.assertRaises(SolverError) as cm:
            newton_root(golden, 10.0, 1e-12, maxits=2)
        self.assertEqual(cm.exception.flag, 1)
        self.assertEqual(cm.exception.its, 2)

        # No real roots; iteration wanders without converging.
        with self.assertRaises(RuntimeError):
            newton_root(lambda x: x ** 2 + 1, 0.5, 1e-12)

    def test_zero_derivative(self):
        from pycalc.numeric.solve import SolverError, newton_root

        # Stationary point of the quadratic at x = -0.5.
        with self.assertRaises(SolverError) as cm:
            newton_root(quadratic, -0.5, 1e-12)
        self.assertEqual(cm.exception.flag, 2)
        self.assertEqual(cm.exception.x, -0.5)

    def test_non_finite(self):
        import math
        from pycalc.numeric.solve import SolverError, newton_root

        with self.assertRaises(SolverError) as cm:
            newton_root(lambda x: math.inf, 0.0, 1e-12)
        self.assertEqual(cm.exception.flag, 3)

    def test_illegal_arguments(self):
        from pycalc.numeric.solve import newton_root

        with self.assertRaises(ValueError):
            newton_root(quadratic, 1.0, 0.0)
        with self.assertRaises(ValueError):
            newton_root(quadratic, 1.0, maxits=0)

    def test_error_details(self):
        from pycalc.numeric.solve import SolverError, newton_root

        with self.assertRaises(SolverError) as cm:
            newton_root(quadratic, -0.5, 1e-12)
        msg = str(cm.exception)
        self.assertTrue(msg.startswith("newton_root() failed to converge:"))
        self.assertIn("details -> Derivative was zero.", msg)
        self.assertIn("x -> -0.5", msg)

# ----------------------------------------------------------------------
