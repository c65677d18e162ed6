# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

"""
The preproc subpackage contains the scaling routine that is applied to
patterns before feature transformation.
"""

from .scaling import scale_data

__all__ = ['scale_data']
