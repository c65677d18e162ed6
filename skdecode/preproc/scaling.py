# Scaling of feature matrices prior to feature transformation.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import numpy as np
from sklearn.base import clone
from sklearn.preprocessing import StandardScaler, MinMaxScaler

_scalers = {'z': StandardScaler,
            'min0max1': MinMaxScaler}


def scale_data(scaling, X):
    """ Scales the features (columns) of X.

    The scaling parameters are estimated on X as a whole, so whatever is
    passed here is treated as one block of data.

    Parameters
    ----------
    scaling : str, None or object
        Either None/'none' (no scaling), 'z' (z-scoring per feature),
        'min0max1' (rescaling of each feature to the [0, 1] range), or a
        scikit-learn style transformer (which is cloned before use).
    X : ndarray
        Numeric (float) array of shape = [n_samples, n_features]

    Returns
    -------
    X_new : ndarray
        Scaled copy of X.
    """

    X = np.asarray(X, dtype=float)

    if scaling is None:
        return X.copy()

    if isinstance(scaling, str):
        key = scaling.lower()
        if key == 'none':
            return X.copy()

        if key not in _scalers:
            msg = "Unknown scaling '%s'; choose from %s or 'none'" % \
                  (scaling, sorted(_scalers.keys()))
            raise ValueError(msg)

        scaler = _scalers[key]()
    elif hasattr(scaling, 'fit_transform'):
        scaler = clone(scaling)
    else:
        raise TypeError('scaling should be a string, None or a transformer '
                        'with a fit_transform method, not %s' % type(scaling))

    return scaler.fit_transform(X)
