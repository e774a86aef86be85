"""
modelcollection Testing Utilities

Shared testing infrastructure for the modelcollection test suite.
"""

from .helpers import EventRecorder
