"""Unit tests for matrix rendering."""

import pytest

from kalman_algebra import Matrix
from kalman_algebra.linalg import describe


class TestDescribe:
    """Tests for human-readable rendering."""

    def test_multi_row(self):
        m = Matrix.from_rows([
            [0.0, 2.0, 3.0, 4.0],
            [0.0, 2.0, 3.0, 4.0],
            [0.0, 2.0, 3.0, 4.0],
        ])
        expected = ("⎛\t0.0\t2.0\t3.0\t4.0\t⎞\n"
                    "⎜\t0.0\t2.0\t3.0\t4.0\t⎥\n"
                    "⎝\t0.0\t2.0\t3.0\t4.0\t⎠\n")

        assert describe(m) == expected
        assert str(m) == expected

    def test_single_row(self):
        assert describe(Matrix.from_rows([[0.0, 2.0, 3.0, 4.0]])) == "(\t0.0\t2.0\t3.0\t4.0\t)\n"

    def test_two_rows_have_no_middle(self):
        assert describe(Matrix.identity(2)) == "⎛\t1.0\t0.0\t⎞\n⎝\t0.0\t1.0\t⎠\n"

    def test_empty(self):
        assert describe(Matrix.zeros(0, 0)) == ""

    def test_repr_round_trips_shape(self):
        assert repr(Matrix.vector([1, 2])) == "Matrix([1.0, 2.0], rows=2, columns=1)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
