"""Where to Watch.

Look up a movie on TMDb, show where it can be streamed, rented or bought,
and estimate when it will reach a subscription service when nothing is
streaming yet.
"""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.1.0-dev"

__author__ = "Where to Watch Team"
