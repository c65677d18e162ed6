# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

"""
The classifiers subpackage provides the correlation classifier, which
predicts labels by correlating (summed) class patterns of a test set with
those of a training set. It can be used both as a function operating on a
"model" (training data + labels) and as a scikit-learn style estimator.
"""

from .correlation_classifier import (CorrelationClassifier,
                                     CorrelationModel,
                                     correlation_classify)

__all__ = ['CorrelationClassifier', 'CorrelationModel',
           'correlation_classify']
