"""
Pytest configuration and shared fixtures for numkit tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from numkit import Config, create_larger, matrix, reset_config  # noqa: E402


# Try to import scipy
try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


# Try to import sympy units
try:
    from sympy.physics import units
    HAS_SYMPY = True
except ImportError:
    HAS_SYMPY = False


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture(scope="session")
def requires_sympy():
    """Skip test if sympy is not available."""
    if not HAS_SYMPY:
        pytest.skip("sympy not available")


@pytest.fixture(autouse=True)
def restore_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def tolerant_config():
    """Configuration with epsilon=1e-9."""
    return Config(epsilon=1e-9)


@pytest.fixture
def tolerant_larger(tolerant_config):
    """``larger`` bound to epsilon=1e-9."""
    return create_larger(tolerant_config)


@pytest.fixture
def sparse_corner():
    """2x2 sparse matrix with a single stored 5 at (1, 1).

    Matrix:
    [[0, 0],
     [0, 5]]
    """
    return matrix([[0, 0], [0, 5]], 'sparse')


@pytest.fixture
def small_dense():
    """Dense 3x3 matrix.

    Matrix:
    [[1, 0, 2],
     [0, 3, 0],
     [4, 0, 5]]
    """
    return matrix([[1, 0, 2], [0, 3, 0], [4, 0, 5]], 'dense')


@pytest.fixture
def small_sparse(small_dense):
    """Same matrix as small_dense in sparse storage."""
    return small_dense.to_sparse()
