# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

"""
The feature_extraction subpackage provides the FeatureTransformer, which
re-expresses features with a (pluggable) transformation method such as PCA
and selects the best-scoring transformed features.
"""

from .transform_methods import (TransformMethod, EstimatorTransformMethod,
                                PCATransform, TRANSFORM_METHODS,
                                register_transform_method,
                                resolve_transform_method)
from .feature_transformer import (FeatureTransformer, transform_features,
                                  select_top_features,
                                  select_above_critical_value)

__all__ = ['TransformMethod', 'EstimatorTransformMethod', 'PCATransform',
           'TRANSFORM_METHODS', 'register_transform_method',
           'resolve_transform_method', 'FeatureTransformer',
           'transform_features', 'select_top_features',
           'select_above_critical_value']
