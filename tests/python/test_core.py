"""
Tests for error classes and configuration.
"""

import dataclasses
import operator
from pathlib import Path

import pytest

import numkit
from numkit import (
    Config, MatrixFormat, MathError, DimensionMismatch, TypeMismatch,
    UnitMismatch, get_config, set_config, reset_config, typed,
)
from numkit.error import (
    NK_ERROR_DIMENSION_MISMATCH, NK_ERROR_INVALID_ARGUMENT,
    NK_ERROR_TYPE_MISMATCH, NK_ERROR_UNIT_MISMATCH,
    check_same_shape, operator_name,
)


class TestErrors:
    """Test the error taxonomy."""

    def test_math_error_default_message(self):
        err = MathError(NK_ERROR_INVALID_ARGUMENT)
        assert err.code == MathError.ERROR_INVALID_ARGUMENT
        assert err.message == "Invalid argument"
        assert str(err) == "Invalid argument"

    def test_math_error_unknown_code(self):
        err = MathError(999)
        assert "999" in err.message

    def test_from_code_with_context(self):
        err = MathError.from_code(NK_ERROR_DIMENSION_MISMATCH, "larger")
        assert err.code == NK_ERROR_DIMENSION_MISMATCH
        assert err.message == "larger: Dimension mismatch"

    def test_dimension_mismatch(self):
        err = DimensionMismatch((2, 2), (3, 3), 'larger')
        assert isinstance(err, MathError)
        assert isinstance(err, ValueError)
        assert err.code == NK_ERROR_DIMENSION_MISMATCH
        assert err.name == 'larger'
        assert err.actual == (2, 2)
        assert err.expected == (3, 3)
        assert str(err) == "Dimension mismatch in function larger: [2, 2] must match [3, 3]"

    def test_dimension_mismatch_without_name(self):
        err = DimensionMismatch([2], [3])
        assert str(err) == "Dimension mismatch: [2] must match [3]"

    def test_type_mismatch(self):
        err = TypeMismatch('larger', ['NoneType', 'number'])
        assert isinstance(err, TypeError)
        assert err.code == NK_ERROR_TYPE_MISMATCH
        assert err.kinds == ('NoneType', 'number')
        assert str(err) == (
            "Unexpected type of arguments in function larger "
            "(actual: NoneType, number)"
        )

    def test_unit_mismatch(self):
        err = UnitMismatch()
        assert isinstance(err, ValueError)
        assert err.code == NK_ERROR_UNIT_MISMATCH
        assert str(err) == "Cannot compare units with different base"


class TestChecks:
    """Test shape guard and operator naming."""

    def test_same_shape_passes(self):
        check_same_shape('f', (2, 3), [2, 3])

    def test_different_shape_raises(self):
        with pytest.raises(DimensionMismatch) as info:
            check_same_shape('f', (2, 2), (3, 3))
        assert info.value.name == 'f'

    def test_different_rank_raises(self):
        with pytest.raises(DimensionMismatch):
            check_same_shape('f', (2,), (2, 1))

    def test_operator_name(self):
        f = typed('my_op', {'number, number': operator.add})
        assert operator_name(f) == 'my_op'
        assert operator_name(operator.add) == 'add'
        assert operator_name(lambda x, y: x) == '<lambda>'
        assert operator_name(object()) is None


class TestConfig:
    """Test the configuration snapshot."""

    def test_defaults(self):
        config = Config()
        assert config.epsilon == 1e-12
        assert config.precision == 64
        assert config.matrix is MatrixFormat.DENSE

    def test_frozen(self):
        config = Config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.epsilon = 1.0

    def test_matrix_string_normalised(self):
        assert Config(matrix='Sparse').matrix is MatrixFormat.SPARSE

    def test_epsilon_none_allowed(self):
        assert Config(epsilon=None).epsilon is None

    @pytest.mark.parametrize("changes, error", [
        ({'epsilon': -1.0}, ValueError),
        ({'epsilon': 'small'}, TypeError),
        ({'epsilon': True}, TypeError),
        ({'precision': 0}, ValueError),
        ({'precision': 1.5}, TypeError),
        ({'matrix': 'diagonal'}, ValueError),
    ])
    def test_validation(self, changes, error):
        with pytest.raises(error):
            Config(**changes)

    def test_replace(self):
        config = Config().replace(epsilon=1e-9)
        assert config.epsilon == 1e-9
        assert config.precision == 64

    def test_set_and_reset(self):
        set_config(epsilon=1e-6, matrix='sparse')
        assert get_config().epsilon == 1e-6
        assert get_config().matrix is MatrixFormat.SPARSE
        reset_config()
        assert get_config() == Config()

    def test_set_config_validates(self):
        with pytest.raises(ValueError):
            set_config(precision=-3)
        assert get_config() == Config()

    def test_parse_format(self):
        assert MatrixFormat.parse('DENSE') is MatrixFormat.DENSE
        assert MatrixFormat.parse(MatrixFormat.SPARSE) is MatrixFormat.SPARSE
        with pytest.raises(ValueError):
            MatrixFormat.parse(3)


class TestPackaging:
    """Test the files setup.py reads."""

    project_root = Path(__file__).parent.parent.parent

    def test_readme_is_long_description(self):
        readme = self.project_root / "README.md"
        assert readme.exists()
        text = readme.read_text(encoding="utf-8")
        assert text.startswith("# numkit")
        assert "pip install" in text

    def test_version_line_parses(self):
        init = self.project_root / "src" / "numkit" / "__init__.py"
        lines = [l for l in init.read_text().splitlines() if l.startswith("__version__")]
        assert len(lines) == 1
        assert lines[0].split("=")[1].strip().strip("'\"") == numkit.__version__
