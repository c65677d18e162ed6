# Feature transformation methods that can be plugged into the
# FeatureTransformer.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import numpy as np
from sklearn.base import clone
from sklearn.decomposition import PCA


class TransformMethod(object):
    """
    Base class of feature transformation methods.

    A transformation method re-expresses the features of a training and
    a test set and returns a score for every new feature, which is used
    by the FeatureTransformer for feature selection (higher is better).
    Any object implementing ``apply`` with the same signature can be used
    as a method; subclassing is not required.
    """

    def apply(self, config, X_train, X_test):
        """ Transforms train and test data.

        Parameters
        ----------
        config : dict
            Configuration of the feature transformation. Implementations
            return a (possibly extended) copy and never modify it in place.
        X_train : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        X_test : ndarray
            Numeric (float) array of shape = [n_samples, n_features]

        Returns
        -------
        config : dict
            Applied configuration.
        X_train_new : ndarray
            Transformed training data.
        X_test_new : ndarray
            Transformed test data (same number of columns as X_train_new).
        scores : ndarray
            Array of shape = [n_new_features] with a score per feature.
        """
        raise NotImplementedError


class EstimatorTransformMethod(TransformMethod):
    """
    Wraps a scikit-learn style decomposition as a transformation method.

    The estimator is fit on the training data and subsequently used to
    transform both the training and test data. Scores are read from a
    fitted attribute of the estimator.

    Parameters
    ----------
    estimator : object
        Estimator implementing fit() and transform(); cloned on every call.
    score_attr : str
        Name of the fitted attribute holding one score per component
        (e.g. 'explained_variance_ratio_').
    """

    def __init__(self, estimator, score_attr):
        self.estimator = estimator
        self.score_attr = score_attr

    def _get_scores(self, estimator):
        return np.asarray(getattr(estimator, self.score_attr), dtype=float)

    def apply(self, config, X_train, X_test):
        est = clone(self.estimator)
        est.fit(X_train)
        X_train_new = est.transform(X_train)
        X_test_new = None if X_test is None else est.transform(X_test)
        scores = self._get_scores(est)

        config = dict(config)
        config['n_components_'] = X_train_new.shape[1]
        return config, X_train_new, X_test_new, scores


class PCATransform(EstimatorTransformMethod):
    """
    Rotates features onto their principal components.

    The components are estimated on the training data only. The score of
    each component is the percentage of variance it explains.

    Parameters
    ----------
    n_components : int, float or None
        Passed to sklearn's PCA (None keeps all components).
    whiten : bool
        Whether to whiten the components (see sklearn's PCA).
    """

    def __init__(self, n_components=None, whiten=False):
        self.n_components = n_components
        self.whiten = whiten
        super(PCATransform, self).__init__(
            PCA(n_components=n_components, whiten=whiten),
            score_attr='explained_variance_ratio_')

    def _get_scores(self, estimator):
        return estimator.explained_variance_ratio_ * 100


TRANSFORM_METHODS = {'pca': PCATransform}


def register_transform_method(name, method_class):
    """ Makes a transformation method available by (case-insensitive) name.

    Parameters
    ----------
    name : str
        Name under which the method can be requested.
    method_class : class
        Class that can be instantiated without arguments and implements
        ``apply``.
    """
    TRANSFORM_METHODS[name.lower()] = method_class


def resolve_transform_method(method):
    """ Returns the transformation method referred to by ``method``.

    Parameters
    ----------
    method : str or object
        Either the name of a registered method (e.g. 'pca') or an object
        with an ``apply(config, X_train, X_test)`` method.

    Returns
    -------
    method : object
        Object implementing ``apply``.

    Raises
    ------
    ValueError
        If a name is given that is not registered.
    TypeError
        If ``method`` is neither a string nor an object with ``apply``.
    """

    if isinstance(method, str):
        try:
            return TRANSFORM_METHODS[method.lower()]()
        except KeyError:
            msg = "Unknown transformation method '%s'; available: %s" % \
                  (method, sorted(TRANSFORM_METHODS.keys()))
            raise ValueError(msg)

    if callable(getattr(method, 'apply', None)):
        return method

    raise TypeError("Don't know how to handle method %r; pass a name or an "
                    "object with an apply() method" % (method,))
