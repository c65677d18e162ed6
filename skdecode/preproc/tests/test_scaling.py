import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal
from sklearn.preprocessing import RobustScaler

from ...preproc import scale_data

X = np.random.RandomState(3).normal(loc=5, scale=2, size=(12, 4))


@pytest.mark.parametrize("scaling", [None, 'none', 'None'])
def test_no_scaling(scaling):

    X_new = scale_data(scaling, X)
    assert_array_equal(X_new, X)
    assert X_new is not X


def test_z_scaling():

    X_new = scale_data('z', X)
    assert_allclose(X_new.mean(axis=0), 0, atol=1e-10)
    assert_allclose(X_new.std(axis=0), 1)


def test_min0max1_scaling():

    X_new = scale_data('min0max1', X)
    assert_allclose(X_new.min(axis=0), 0)
    assert_allclose(X_new.max(axis=0), 1)


def test_transformer_object():

    scaler = RobustScaler()
    X_new = scale_data(scaler, X)
    assert X_new.shape == X.shape
    assert not hasattr(scaler, 'center_')


def test_constant_feature_stays_finite():

    X_const = X.copy()
    X_const[:, 0] = 1.0
    assert np.all(np.isfinite(scale_data('z', X_const)))


def test_invalid_scaling():

    with pytest.raises(ValueError):
        scale_data('unknown', X)

    with pytest.raises(TypeError):
        scale_data(3, X)
