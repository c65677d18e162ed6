import numpy as np
import pytest
from numpy.testing import assert_allclose
from sklearn.decomposition import TruncatedSVD

from ...feature_extraction import (PCATransform, EstimatorTransformMethod,
                                   TransformMethod, TRANSFORM_METHODS,
                                   register_transform_method,
                                   resolve_transform_method)

rng = np.random.RandomState(0)
X_train = rng.normal(size=(15, 6))
X_test = rng.normal(size=(5, 6))


@pytest.mark.transformer
def test_pca_transform():

    config = {'method': 'pca'}
    new_config, X_tr, X_te, scores = PCATransform().apply(config, X_train,
                                                          X_test)
    assert X_tr.shape == (15, 6)
    assert X_te.shape == (5, 6)
    assert scores.shape == (6,)
    assert_allclose(scores.sum(), 100)
    assert 'n_components_' not in config
    assert new_config['n_components_'] == 6


@pytest.mark.transformer
def test_pca_n_components():

    _, X_tr, X_te, scores = PCATransform(n_components=2).apply({}, X_train,
                                                               X_test)
    assert X_tr.shape[1] == X_te.shape[1] == scores.size == 2


@pytest.mark.transformer
def test_estimator_transform_method():

    method = EstimatorTransformMethod(TruncatedSVD(n_components=3,
                                                   random_state=0),
                                      score_attr='explained_variance_ratio_')
    config, X_tr, X_te, scores = method.apply({}, X_train, X_test)
    assert X_tr.shape == (15, 3)
    assert X_te.shape == (5, 3)
    assert scores.shape == (3,)
    assert config['n_components_'] == 3


@pytest.mark.transformer
def test_resolve_by_name():

    assert isinstance(resolve_transform_method('pca'), PCATransform)
    assert isinstance(resolve_transform_method('PCA'), PCATransform)


@pytest.mark.transformer
def test_resolve_object():

    method = PCATransform()
    assert resolve_transform_method(method) is method


@pytest.mark.transformer
def test_resolve_unknown_name():

    with pytest.raises(ValueError):
        resolve_transform_method('does_not_exist')


@pytest.mark.parametrize("method", [None, 1, object(), ['pca']])
@pytest.mark.transformer
def test_resolve_invalid_kind(method):

    with pytest.raises(TypeError):
        resolve_transform_method(method)


@pytest.mark.transformer
def test_register_transform_method():

    class Passthrough(TransformMethod):
        def apply(self, config, X_train, X_test):
            return config, X_train, X_test, X_train.var(axis=0)

    register_transform_method('Passthrough', Passthrough)
    try:
        assert isinstance(resolve_transform_method('passthrough'),
                          Passthrough)
    finally:
        del TRANSFORM_METHODS['passthrough']
