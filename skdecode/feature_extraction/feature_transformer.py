# Class to transform features (e.g. by PCA) and, optionally, select the
# highest-scoring transformed features.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import warnings
from math import ceil
import numpy as np
from sklearn.base import BaseEstimator

from ..exceptions import (MaxFeaturesExceededWarning, NoSelectionWarning,
                          NoFeaturesSelectedWarning)
from ..preproc import scale_data
from .transform_methods import resolve_transform_method


def select_top_features(scores, n_vox):
    """ Returns the indices of the n_vox highest scores.

    Parameters
    ----------
    scores : ndarray
        Array of shape = [n_features] with feature scores.
    n_vox : int or float
        Number of features to keep (int >= 1) or proportion of features to
        keep (0 < float < 1).

    Returns
    -------
    idx : ndarray or None
        Indices of the selected features, sorted from high to low score
        (ties in original order), or None if all features should be kept.
    """

    n_features = scores.size

    if n_vox <= 0:
        raise ValueError('n_vox should be larger than 0, not %r' % (n_vox,))

    if n_vox < 1:
        n_vox = int(ceil(n_vox * n_features))
    elif n_vox != int(n_vox):
        raise ValueError('n_vox >= 1 should be a whole number of features, '
                         'not %r' % (n_vox,))
    elif n_vox > n_features:
        warnings.warn(MaxFeaturesExceededWarning(
            'n_vox (%i) is larger than the number of available features '
            '(%i); doing no selection.' % (n_vox, n_features)))
        return None

    return np.argsort(-scores, kind='stable')[:int(n_vox)]


def select_above_critical_value(scores, critical_value):
    """ Returns the indices of scores larger than critical_value.

    Returns None (keep all) if every score, or no score at all, exceeds
    the critical value.
    """

    idx = scores > critical_value

    if idx.all():
        warnings.warn(NoSelectionWarning(
            'All scores are larger than the critical value (%r), so no '
            'selection is performed.' % (critical_value,)))
        return None

    if not idx.any():
        warnings.warn(NoFeaturesSelectedWarning(
            'No score is larger than the critical value (%r); keeping all '
            'features.' % (critical_value,)))
        return None

    return np.flatnonzero(idx)


class FeatureTransformer(BaseEstimator):
    """
    Transforms features and selects a subset of the transformed features.

    Feature transformation entails methods that apply transformations of
    feature space (e.g. rotations, as is the case for PCA). The
    transformation is estimated on the training data and then applied to
    the test data. The scores that the method assigns to each new feature
    can subsequently be used to keep only the best features.

    Parameters
    ----------
    method : str or object
        Transformation method: the name of a registered method (default:
        'pca') or an object implementing
        ``apply(config, X_train, X_test)``.
    estimation : str
        'across', 'all' or 'none'. With 'across', train and test data are
        scaled together and the transformation is estimated on the training
        data and applied to both. With 'all', the training data are taken to
        be *all* data; the test data are ignored and replaced by zeros (it
        is up to the user to avoid double dipping in this case). Any other
        value skips scaling.
    n_vox : int, float or str
        If given, the number of top-scoring features to keep (int >= 1),
        the proportion of features to keep (float < 1) or 'all' (no
        selection at all).
    critical_value : float
        If given, keep only features with a score larger than this value
        (e.g. the percentage of explained variance for PCA).
    scaling : str or object
        Scaling applied before transformation (see
        ``skdecode.preproc.scale_data``); only used for estimation 'across'
        and 'all'.

    Attributes
    ----------
    scores_ : ndarray
        Scores of all transformed features (before selection).
    idx_ : ndarray
        Indices of the transformed features that were kept.
    config_ : dict
        Configuration as applied by the transformation method.
    """

    def __init__(self, method='pca', estimation='across', n_vox=None,
                 critical_value=None, scaling='z'):

        self.method = method
        self.estimation = estimation
        self.n_vox = n_vox
        self.critical_value = critical_value
        self.scaling = scaling

    def _scale(self, X_train, X_test):

        estimation = str(self.estimation).lower()

        if estimation == 'across':
            if X_test is None:
                raise ValueError("Estimation 'across' needs test data.")

            n_train = X_train.shape[0]
            scaled = scale_data(self.scaling, np.vstack((X_train, X_test)))
            return scaled[:n_train, :], scaled[n_train:, :]

        elif estimation == 'all':
            X_train = scale_data(self.scaling, X_train)
            return X_train, np.zeros(X_train.shape)

        return X_train, X_test

    def transform(self, X_train, X_test=None):
        """ Transforms (and optionally selects) features.

        Parameters
        ----------
        X_train : ndarray
            Numeric (float) array of shape = [n_samples, n_features] with
            training data (or all data, for estimation='all').
        X_test : ndarray
            Numeric (float) array of shape = [n_samples, n_features] with
            test data. Ignored for estimation='all'.

        Returns
        -------
        X_train_new : ndarray
            Transformed (and selected) training data.
        X_test_new : ndarray
            Transformed (and selected) test data.
        config : dict
            Configuration as applied by the transformation method.
        """

        X_train = np.asarray(X_train, dtype=float)
        if X_test is not None:
            X_test = np.asarray(X_test, dtype=float)

        method = resolve_transform_method(self.method)
        X_train, X_test = self._scale(X_train, X_test)

        config, X_train_new, X_test_new, scores = method.apply(
            self.get_params(), X_train, X_test)
        scores = np.asarray(scores, dtype=float).ravel()

        if X_test_new is not None and \
                X_train_new.shape[1] != X_test_new.shape[1]:
            msg = 'Transformed train (%i) and test (%i) data have a ' \
                  'different number of features.' % \
                  (X_train_new.shape[1], X_test_new.shape[1])
            raise ValueError(msg)

        if scores.size != X_train_new.shape[1]:
            msg = 'Got %i scores for %i transformed features.' % \
                  (scores.size, X_train_new.shape[1])
            raise ValueError(msg)

        self.scores_ = scores
        self.config_ = config
        self.idx_ = np.arange(scores.size)

        if self.n_vox is not None:

            if isinstance(self.n_vox, str):
                if self.n_vox.lower() == 'all':
                    return X_train_new, X_test_new, config
                raise ValueError("Unknown value '%s' for n_vox; use a number "
                                 "or 'all'" % self.n_vox)

            idx = select_top_features(scores, self.n_vox)
            if idx is not None:
                self._select(idx)

        if self.critical_value is not None:
            idx = select_above_critical_value(scores[self.idx_],
                                              self.critical_value)
            if idx is not None:
                self._select(idx)

        X_train_new = X_train_new[:, self.idx_]
        if X_test_new is not None:
            X_test_new = X_test_new[:, self.idx_]

        return X_train_new, X_test_new, config

    def _select(self, idx):
        self.idx_ = self.idx_[idx]


def transform_features(config, X_train, X_test=None):
    """ Transforms features given a configuration dictionary.

    Parameters
    ----------
    config : dict
        Parameters of the FeatureTransformer (method, estimation, n_vox,
        critical_value, scaling); missing keys take their default value.
        Other keys, such as those added by a transformation method to an
        applied config, are ignored.
    X_train : ndarray
        Numeric (float) array of shape = [n_samples, n_features]
    X_test : ndarray
        Numeric (float) array of shape = [n_samples, n_features]

    Returns
    -------
    X_train_new, X_test_new, config
        See FeatureTransformer.transform.
    """
    params = FeatureTransformer._get_param_names()
    config = dict((k, v) for k, v in config.items() if k in params)
    return FeatureTransformer(**config).transform(X_train, X_test)
