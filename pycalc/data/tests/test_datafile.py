import os
import tempfile
from unittest import TestCase

import numpy as np


# ======================================================================

class TestDataFile(TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp_dir.name, 'out.dat')

    def tearDown(self):
        self.tmp_dir.cleanup()

    def read(self) -> str:
        with open(self.path) as fh:
            return fh.read()

    def test_write(self):
        from pycalc.data import DataFile

        out = DataFile(self.path)
        out.write(1.5, -2.0)
        out.write(3, 4)
        out.close()
        self.assertTrue(out.closed)
        self.assertEqual(self.read(), "1.5 -2.0\n3 4\n")

    def test_truncates_existing(self):
        from pycalc.data import DataFile

        with open(self.path, 'w') as fh:
            fh.write("old contents\n")

        with DataFile(self.path):
            pass
        self.assertEqual(self.read(), "")

    def test_write_rows(self):
        from pycalc.data import DataFile
        from pycalc.numeric import bisect_root_many

        def f(x):
            return x ** 2 + x - 6

        roots = bisect_root_many(f, -5.0, 4.0, 9, 1e-12)
        with DataFile(self.path) as out:
            out.write_rows((r, f(r)) for r in roots)

        data = np.loadtxt(self.path)
        np.testing.assert_array_equal(data, [[-3.0, 0.0], [2.0, 0.0]])

    def test_write_after_close(self):
        from pycalc.data import DataFile

        out = DataFile(self.path)
        out.close()
        with self.assertRaises(ValueError):
            out.write(1.0, 2.0)

    def test_bad_path(self):
        from pycalc.data import DataFile

        with self.assertRaises(OSError):
            DataFile(os.path.join(self.tmp_dir.name, 'missing', 'out.dat'))

# ----------------------------------------------------------------------
