# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

"""
Warning categories used by skdecode. None of these interrupt an analysis;
they flag a fallback that was taken (e.g. no feature selection, clipped
correlations). Each category carries a stable ``code`` that can be used to
filter or count them, e.g. after ``warnings.catch_warnings(record=True)``.
"""


class DecodingWarning(UserWarning):
    """ Base class for all non-fatal skdecode diagnostics. """
    code = 'DECODING'


class MaxFeaturesExceededWarning(DecodingWarning):
    """ Requested number of features exceeds the available features. """
    code = 'DECODING_FEATURE_TRANSFORMATION:MAXIMAL_N_VOX_EXCEEDED'


class NoSelectionWarning(DecodingWarning):
    """ All scores exceed the critical value, so nothing was removed. """
    code = 'DECODING_FEATURE_TRANSFORMATION:ALL_SCORES_LARGER'


class NoFeaturesSelectedWarning(DecodingWarning):
    """ No score exceeds the critical value; all features were kept. """
    code = 'DECODING_FEATURE_TRANSFORMATION:NO_SCORES_LARGER'


class CorrelationClippedWarning(DecodingWarning):
    """ Correlations of +1 or -1 were clipped before the z-transform. """
    code = 'CORRELATION_CLASSIFIER:ZCORRINF'


class SingleFeatureWarning(DecodingWarning):
    """ Only one feature present, so no correlation can be computed. """
    code = 'CORRELATION_CLASSIFIER:ONEVOXEL'


__all__ = ['DecodingWarning', 'MaxFeaturesExceededWarning',
           'NoSelectionWarning', 'NoFeaturesSelectedWarning',
           'CorrelationClippedWarning', 'SingleFeatureWarning']
