# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

from . import exceptions
from . import preproc
from . import feature_extraction
from . import classifiers

__version__ = '0.1.0'

__all__ = ['exceptions', 'preproc', 'feature_extraction', 'classifiers']
