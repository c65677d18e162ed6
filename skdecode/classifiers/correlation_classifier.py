# Haxby-style correlation classifier: predicts the label of a test pattern
# by the training pattern it correlates most with.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import warnings
from collections import namedtuple
from itertools import combinations
import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin

from ..exceptions import CorrelationClippedWarning, SingleFeatureWarning

CorrelationModel = namedtuple('CorrelationModel', ['X_train', 'y_train'])

MAX_CORRELATION = 0.99999


def _unpack_model(model):

    if isinstance(model, dict):
        return model['X_train'], model['y_train']

    return model.X_train, model.y_train


def _prototypes(X, y, labels):
    """ Sums all patterns (rows) per label; returns [n_labels, n_features].
    """
    return np.array([X[y == label, :].sum(axis=0) for label in labels])


def _correlate(A, B):
    """ Pearson correlation between the rows of A and the rows of B. """

    with np.errstate(invalid='ignore', divide='ignore'):
        r = np.corrcoef(A, B)

    return r[:A.shape[0], A.shape[0]:]


def _pair_correlation(train, test):
    """ Correlation of the first-two-classes pairing, for diagnostics. """

    if train.shape[0] < 2 or test.shape[0] < 2:
        return np.nan

    r2 = _correlate(np.concatenate((train[0], test[0]))[np.newaxis, :],
                    np.concatenate((train[1], test[1]))[np.newaxis, :])[0, 0]

    if np.isclose(r2, 1):
        r2 = _correlate(train[[0]], test[[1]])[0, 0]

    return r2


def _max_index(z):
    """ Column index of the maximum per row, ignoring NaN (e.g. from a
    constant prototype); rows without any finite value give index 0.
    """
    return np.argmax(np.where(np.isnan(z), -np.inf, z), axis=1)


def correlation_classify(y_test, X_test, model):
    """ Classifies test patterns by correlating them with training patterns.

    This implements a Haxby-style MVPA analysis: all patterns belonging
    to one class are summed into a single prototype (separately for the
    train and test set), after which every test prototype is correlated
    with every training prototype. A test prototype receives the label of
    the training prototype it correlates with most. For more than two
    classes, the classifier is by definition a one-vs-one classifier and
    the decision values are set up pairwise accordingly.

    Parameters
    ----------
    y_test : list or ndarray
        Labels of the test patterns, used to group them into prototypes.
    X_test : ndarray
        Numeric (float) array of shape = [n_samples, n_features]
    model : CorrelationModel, dict or object
        Anything with X_train (ndarray of shape = [n_samples, n_features])
        and y_train (labels) attributes or keys.

    Returns
    -------
    predicted_labels : ndarray
        Array of shape = [n_test_labels] with the predicted (training)
        label for every distinct test label (in sorted order).
    decision_values : ndarray
        Array of shape = [n_test_labels, n_pairs] with Fisher z-transformed
        correlation differences z[:, i] - z[:, j] for every pair of
        training labels i < j. These give a useful distance from the
        classification boundary, but are not probabilities.
    diagnostics : dict
        'correlation' (correlation of the concatenated first-two-classes
        pairing), 'correlation_matrix' (test x train prototype
        correlations), 'z_matrix' (their Fisher z-transform), and
        'labels_train'/'labels_test' (the labels of the columns/rows).
    """

    X_train, y_train = _unpack_model(model)
    X_train = np.asarray(X_train, dtype=float)
    y_train = np.asarray(y_train)
    X_test = np.asarray(X_test, dtype=float)
    y_test = np.asarray(y_test)

    if X_train.shape[1] != X_test.shape[1]:
        msg = 'Train (%i) and test (%i) data have a different number of ' \
              'features.' % (X_train.shape[1], X_test.shape[1])
        raise ValueError(msg)

    labels_train = np.unique(y_train)
    labels_test = np.unique(y_test)
    n_train, n_test = labels_train.size, labels_test.size
    n_pairs = n_train * (n_train - 1) // 2

    # Combine multiple patterns of the same label into one prototype
    train = _prototypes(X_train, y_train, labels_train)
    test = _prototypes(X_test, y_test, labels_test)

    # Normalization is only needed when pools differ in size
    if X_train.shape[0] != X_test.shape[0]:
        train = train / X_train.shape[0]
        test = test / X_test.shape[0]

    diagnostics = {'labels_train': labels_train, 'labels_test': labels_test}

    if X_train.shape[1] < 2:
        warnings.warn(SingleFeatureWarning(
            'Only one feature present (may happen at the borders of a '
            'mask); no correlation possible, setting values to NaN!'))

        diagnostics.update(correlation=np.nan,
                           correlation_matrix=np.full((n_test, n_train),
                                                      np.nan),
                           z_matrix=np.full((n_test, n_train), np.nan))
        decision_values = np.full((n_test, n_pairs), np.nan)
        predicted_labels = np.full(n_test, np.nan)
        return predicted_labels, decision_values, diagnostics

    r = _correlate(test, train)
    r2 = _pair_correlation(train, test)

    # Force finite values for the z-transform; eps corrects rounding errors
    too_large = (np.abs(r) + np.finfo(float).eps) >= 1
    if too_large.any():
        warnings.warn(CorrelationClippedWarning(
            'Correlations of +1 or -1 found. Correcting to +/-%s to avoid '
            'infinite z-transformed correlations!' % MAX_CORRELATION))
        r = r.copy()
        r[too_large] = np.sign(r[too_large]) * MAX_CORRELATION

    z = np.arctanh(r)

    pairs = list(combinations(range(n_train), 2))
    decision_values = np.zeros((n_test, n_pairs))
    for i, (a, b) in enumerate(pairs):
        decision_values[:, i] = z[:, a] - z[:, b]

    predicted_labels = labels_train[_max_index(z)]

    diagnostics.update(correlation=r2, correlation_matrix=r, z_matrix=z)
    return predicted_labels, decision_values, diagnostics


class CorrelationClassifier(ClassifierMixin, BaseEstimator):
    """
    Correlation classifier in scikit-learn style.

    Fitting simply stores the training data, which serve as the model for
    ``correlation_classify``. Use ``classify`` to classify grouped test
    patterns (one prediction per distinct test label); ``predict`` and
    ``decision_function`` treat every test pattern as its own group, so
    the classifier can be used in, e.g., scikit-learn's cross_val_score.

    Attributes
    ----------
    classes_ : ndarray
        Sorted distinct training labels.
    X_train_ : ndarray
        Training data.
    y_train_ : ndarray
        Training labels.
    diagnostics_ : dict
        Diagnostics of the last classification (see correlation_classify).
    """

    def fit(self, X, y):
        """ Fits CorrelationClassifier.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        y : list or ndarray
            List or ndarray with labels
        """

        X = np.asarray(X, dtype=float)
        y = np.asarray(y)

        if X.shape[0] != y.size:
            raise ValueError('X has %i samples, but y has %i labels.' %
                             (X.shape[0], y.size))

        self.X_train_ = X
        self.y_train_ = y
        self.classes_ = np.unique(y)
        return self

    @property
    def model_(self):
        return CorrelationModel(self.X_train_, self.y_train_)

    def classify(self, X, y):
        """ Classifies test patterns grouped by label.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        y : list or ndarray
            Labels of the test patterns (used for grouping only).

        Returns
        -------
        predicted_labels, decision_values, diagnostics
            See correlation_classify.
        """

        predicted, decision_values, diagnostics = correlation_classify(
            y, X, self.model_)
        self.diagnostics_ = diagnostics
        return predicted, decision_values, diagnostics

    def _classify_rows(self, X):
        X = np.asarray(X, dtype=float)
        return self.classify(X, np.arange(X.shape[0]))

    def predict(self, X):
        """ Predicts the label of every row of X.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]

        Returns
        -------
        predicted_labels : ndarray
            Array of shape = [n_samples] with predicted labels.
        """
        return self._classify_rows(X)[0]

    def decision_function(self, X):
        """ Returns pairwise decision values for every row of X.

        Returns
        -------
        decision_values : ndarray
            Array of shape = [n_samples, n_pairs]; positive values for pair
            (i, j) favour classes_[i] over classes_[j]. For two classes,
            an array of shape = [n_samples] in which positive values favour
            classes_[1], as scikit-learn expects for binary classifiers.
        """
        decision_values = self._classify_rows(X)[1]

        if self.classes_.size == 2:
            return -decision_values[:, 0]

        return decision_values
