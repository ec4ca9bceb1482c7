from unittest import TestCase


# ======================================================================

class TestCalcOptions(TestCase):
    def test_defaults(self):
        from pycalc import get_calc_options

        opts = get_calc_options()
        self.assertEqual(opts.precision, 1e-16)
        self.assertEqual(opts.derivative_steps, 20)
        self.assertEqual(opts.n_rectangles, 100000)
        self.assertEqual(opts.bisect_maxits, 1100)
        self.assertEqual(opts.newton_maxits, 100)

    def test_set_calc_options(self):
        from pycalc import get_calc_options, set_calc_options

        previous = get_calc_options()
        try:
            set_calc_options(precision=1e-10, newton_maxits=5)
            opts = get_calc_options()
            self.assertEqual(opts.precision, 1e-10)
            self.assertEqual(opts.newton_maxits, 5)
            self.assertEqual(opts.n_rectangles, previous.n_rectangles)
        finally:
            set_calc_options(precision=previous.precision,
                             newton_maxits=previous.newton_maxits)

        self.assertEqual(get_calc_options(), previous)

    def test_illegal_options(self):
        from pycalc import get_calc_options, set_calc_options

        previous = get_calc_options()
        with self.assertRaises(TypeError):
            set_calc_options(tolerance=1e-6)
        with self.assertRaises(ValueError):
            set_calc_options(precision=0.0)
        with self.assertRaises(ValueError):
            set_calc_options(derivative_steps=0)
        with self.assertRaises(ValueError):
            set_calc_options(bisect_maxits=0)

        # Failed changes leave options untouched.
        self.assertEqual(get_calc_options(), previous)

    def test_frozen(self):
        from dataclasses import FrozenInstanceError
        from pycalc import get_calc_options

        with self.assertRaises(FrozenInstanceError):
            get_calc_options().precision = 1.0

    def test_calc_options_context(self):
        from pycalc import calc_options, get_calc_options

        with calc_options(n_rectangles=10) as opts:
            self.assertEqual(opts.n_rectangles, 10)
            self.assertEqual(get_calc_options().n_rectangles, 10)
        self.assertEqual(get_calc_options().n_rectangles, 100000)

        # Restored after an exception too.
        with self.assertRaises(KeyError):
            with calc_options(precision=1e-3):
                raise KeyError
        self.assertEqual(get_calc_options().precision, 1e-16)

# ----------------------------------------------------------------------
