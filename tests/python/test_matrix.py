"""
Tests for DenseMatrix, SparseMatrix and the conversion API.
"""

from decimal import Decimal

import numpy as np
import pytest

from numkit import (
    DenseMatrix, MatrixFormat, SparseMatrix, from_nested, matrix, set_config,
    to_dense, to_nested, to_sparse,
)


class TestDenseMatrixCreation:
    """Test DenseMatrix creation and validation."""

    def test_create_2d(self):
        mat = DenseMatrix([[1, 2, 3], [4, 5, 6]])
        assert mat.shape == (2, 3)
        assert mat.ndim == 2
        assert mat.size == 6
        assert mat.datatype is None
        assert mat.storage == 'dense'
        assert len(mat) == 2

    def test_create_1d_and_3d(self):
        assert DenseMatrix([1, 2]).shape == (2,)
        cube = DenseMatrix([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])
        assert cube.shape == (2, 2, 2)
        assert cube[1, 0, 1] == 6

    def test_create_empty(self):
        assert DenseMatrix().shape == (0,)
        assert DenseMatrix([[], []]).shape == (2, 0)

    def test_tuples_become_lists(self):
        mat = DenseMatrix(((1, 2), (3, 4)))
        assert mat.to_array() == [[1, 2], [3, 4]]

    def test_input_is_copied(self):
        data = [[1, 2], [3, 4]]
        mat = DenseMatrix(data)
        data[0][0] = 99
        assert mat[0, 0] == 1

    @pytest.mark.parametrize("data", [
        [[1, 2], [3]],
        [[1, 2], 3],
        [1, [2]],
    ])
    def test_jagged_rejected(self, data):
        with pytest.raises(ValueError):
            DenseMatrix(data)

    def test_scalar_rejected(self):
        with pytest.raises(ValueError):
            DenseMatrix(5)

    def test_datatype(self):
        assert DenseMatrix([1], datatype='number').datatype == 'number'
        with pytest.raises(ValueError):
            DenseMatrix([1], datatype='float64')

    def test_from_numpy(self):
        mat = DenseMatrix.from_numpy(np.array([[1.5, 0.0], [0.0, 2.0]]))
        assert mat.shape == (2, 2)
        assert mat.datatype == 'number'
        assert mat[0, 0] == 1.5
        assert isinstance(mat[0, 0], float)
        assert DenseMatrix.from_numpy(np.array([True, False])).datatype == 'boolean'
        with pytest.raises(ValueError):
            DenseMatrix.from_numpy(np.float64(1.0))

    def test_zeros(self):
        mat = DenseMatrix.zeros((2, 3), datatype='BigNumber')
        assert mat.to_array() == [[Decimal(0)] * 3] * 2
        assert mat.datatype == 'BigNumber'


class TestDenseMatrixAccess:
    """Test element access and conversions."""

    def test_get(self):
        mat = DenseMatrix([[1, 2], [3, 4]])
        assert mat.get((1, 0)) == 3
        assert mat[-1, -1] == 4

    def test_get_out_of_range(self):
        mat = DenseMatrix([[1, 2], [3, 4]])
        with pytest.raises(IndexError):
            mat[2, 0]
        with pytest.raises(IndexError):
            mat[0]

    def test_to_array_is_a_copy(self):
        mat = DenseMatrix([[1, 2], [3, 4]])
        array = mat.to_array()
        array[0][0] = 99
        assert mat[0, 0] == 1

    def test_to_numpy(self):
        mat = DenseMatrix([[1, 2], [3, 4]])
        np.testing.assert_array_equal(mat.to_numpy(), np.array([[1, 2], [3, 4]]))

    def test_copy_and_equality(self):
        mat = DenseMatrix([[1, 2]], datatype='number')
        clone = mat.copy()
        assert clone == mat
        assert clone is not mat
        assert clone != DenseMatrix([[1, 2]])
        assert mat != [[1, 2]]


class TestSparseMatrixCreation:
    """Test SparseMatrix creation and invariant validation."""

    def test_create_from_arrays(self):
        # [[1, 0, 2],
        #  [0, 3, 0]]
        mat = SparseMatrix([1, 3, 2], [0, 1, 0], [0, 1, 2, 3], (2, 3))
        assert mat.shape == (2, 3)
        assert mat.rows == 2
        assert mat.cols == 3
        assert mat.nnz == 3
        assert mat.storage == 'sparse'
        assert mat.values == (1, 3, 2)
        assert mat.row_index == (0, 1, 0)
        assert mat.column_pointer == (0, 1, 2, 3)
        assert mat.density == pytest.approx(0.5)

    @pytest.mark.parametrize("values, row_index, column_pointer, shape", [
        ([1], [0], [0, 1], (2, 2)),            # pointer length
        ([1], [0], [1, 1, 1], (2, 2)),         # pointer start
        ([1], [0], [0, 0, 0], (2, 2)),         # pointer end
        ([1, 2], [0, 1], [0, 2, 1, 2], (2, 3)),  # pointer decreases
        ([1], [2], [0, 1, 1], (2, 2)),         # row out of range
        ([1, 2], [1, 0], [0, 2, 2], (2, 2)),   # rows not increasing
        ([1, 2], [1, 1], [0, 2, 2], (2, 2)),   # duplicate row
        ([0], [0], [0, 1, 1], (2, 2)),         # explicit zero
        ([False], [0], [0, 1, 1], (2, 2)),     # explicit boolean zero
        ([1], [0, 1], [0, 1, 1], (2, 2)),      # index length
        ([1], [0], [0, 1], (2,)),              # not 2-D
    ])
    def test_invalid(self, values, row_index, column_pointer, shape):
        with pytest.raises(ValueError):
            SparseMatrix(values, row_index, column_pointer, shape)

    def test_from_dense_drops_zeros(self, small_dense):
        mat = SparseMatrix.from_dense(small_dense)
        assert mat.nnz == 5
        assert mat.values == (1, 4, 3, 2, 5)
        assert mat.row_index == (0, 2, 1, 0, 2)
        assert mat.column_pointer == (0, 2, 3, 5)

    def test_from_dense_keeps_datatype(self):
        dense = DenseMatrix([[True, False]], datatype='boolean')
        assert SparseMatrix.from_dense(dense).datatype == 'boolean'
        assert SparseMatrix.from_dense([[1, 0]], datatype='number').datatype == 'number'

    def test_from_dense_requires_2d(self):
        with pytest.raises(ValueError):
            SparseMatrix.from_dense(DenseMatrix([1, 0, 2]))

    def test_from_coo(self):
        mat = SparseMatrix.from_coo(
            row=[1, 0, 2, 1],
            col=[2, 0, 0, 1],
            values=[7, 1, 0, 3],
            shape=(3, 3),
        )
        assert mat.nnz == 3
        assert mat.to_array() == [[1, 0, 0], [0, 3, 7], [0, 0, 0]]

    def test_from_coo_invalid(self):
        with pytest.raises(ValueError):
            SparseMatrix.from_coo([0, 0], [1, 1], [1, 2], (2, 2))
        with pytest.raises(ValueError):
            SparseMatrix.from_coo([5], [0], [1], (2, 2))
        with pytest.raises(ValueError):
            SparseMatrix.from_coo([0], [0], [1, 2], (2, 2))

    def test_zeros(self):
        mat = SparseMatrix.zeros(3, 4)
        assert mat.shape == (3, 4)
        assert mat.nnz == 0
        assert mat.column_pointer == (0, 0, 0, 0, 0)


class TestSparseMatrixAccess:
    """Test element access and conversions."""

    def test_get(self, small_sparse):
        assert small_sparse[2, 2] == 5
        assert small_sparse[1, 1] == 3
        assert small_sparse[0, 1] == 0
        assert small_sparse.get((-1, 0)) == 4

    def test_implicit_entry_uses_datatype_zero(self):
        mat = SparseMatrix.from_dense([[Decimal(1), Decimal(0)]], datatype='BigNumber')
        assert mat[0, 1] == Decimal(0)
        assert isinstance(mat[0, 1], Decimal)

    def test_column_and_items(self, small_sparse):
        assert small_sparse.column(0) == ((0, 2), (1, 4))
        assert small_sparse.column(1) == ((1,), (3,))
        assert list(small_sparse.items()) == [
            (0, 0, 1), (2, 0, 4), (1, 1, 3), (0, 2, 2), (2, 2, 5),
        ]

    def test_to_dense(self, small_dense, small_sparse):
        assert small_sparse.to_dense() == small_dense
        assert small_sparse.to_array() == small_dense.to_array()

    def test_equality(self, small_sparse):
        assert small_sparse.copy() == small_sparse
        assert small_sparse != SparseMatrix.zeros(3, 3)
        assert small_sparse != small_sparse.to_dense()


class TestScipyInterop:
    """Test conversion to and from scipy.sparse."""

    def test_from_scipy(self, requires_scipy):
        import scipy.sparse as sp
        scipy_mat = sp.csr_matrix(np.array([[1, 0, 2], [0, 0, 3]]))
        mat = SparseMatrix.from_scipy(scipy_mat)
        assert mat.shape == (2, 3)
        assert mat.nnz == 3
        assert mat.datatype == 'number'
        assert mat.to_array() == [[1, 0, 2], [0, 0, 3]]

    def test_from_scipy_drops_explicit_zeros(self, requires_scipy):
        import scipy.sparse as sp
        scipy_mat = sp.csc_matrix(
            (np.array([1.0, 0.0]), np.array([0, 1]), np.array([0, 2])),
            shape=(2, 1),
        )
        mat = SparseMatrix.from_scipy(scipy_mat)
        assert mat.nnz == 1

    def test_from_scipy_rejects_dense(self, requires_scipy):
        with pytest.raises(TypeError):
            SparseMatrix.from_scipy(np.eye(2))

    def test_to_scipy(self, requires_scipy, small_sparse, small_dense):
        scipy_mat = small_sparse.to_scipy()
        assert scipy_mat.shape == (3, 3)
        assert scipy_mat.nnz == 5
        np.testing.assert_array_equal(scipy_mat.toarray(), small_dense.to_numpy())

    def test_empty_to_scipy(self, requires_scipy):
        assert SparseMatrix.zeros(2, 2).to_scipy().nnz == 0


class TestConversionAPI:
    """Test to_sparse / to_dense / from_nested / to_nested / matrix."""

    def test_round_trip(self, small_dense):
        assert to_dense(to_sparse(small_dense)) == small_dense
        assert to_nested(from_nested([[1, 2]])) == [[1, 2]]

    def test_to_sparse_requires_2d(self):
        with pytest.raises(ValueError):
            to_sparse(DenseMatrix([[[1]]]))

    def test_matrix_default_dense(self):
        mat = matrix([[1, 0]])
        assert isinstance(mat, DenseMatrix)
        assert matrix().shape == (0,)

    def test_matrix_sparse(self):
        mat = matrix([[1, 0]], 'sparse')
        assert isinstance(mat, SparseMatrix)
        assert mat.nnz == 1
        assert isinstance(matrix([[1, 0]], MatrixFormat.SPARSE), SparseMatrix)

    def test_matrix_follows_config(self):
        set_config(matrix='sparse')
        assert isinstance(matrix([[1, 0]]), SparseMatrix)

    def test_matrix_from_matrix(self, small_dense, small_sparse):
        assert matrix(small_sparse, 'dense') == small_dense
        assert matrix(small_dense, 'sparse') == small_sparse
        assert matrix(small_sparse, 'sparse') == small_sparse
        assert matrix(small_dense, 'sparse', datatype='number').datatype == 'number'

    def test_matrix_from_scipy(self, requires_scipy):
        import scipy.sparse as sp
        mat = matrix(sp.eye(2, format='csr'))
        assert isinstance(mat, DenseMatrix)
        assert mat.to_array() == [[1.0, 0.0], [0.0, 1.0]]
        assert isinstance(matrix(sp.eye(2), 'sparse'), SparseMatrix)
