"""Core infrastructure subpackage.

This package contains the Session facade class along with cluster context
handling and the svcat/kubectl wrappers.
"""

from svcat_auto.core.cluster import Cluster
from svcat_auto.core.tools import Kubectl, Svcat
from svcat_auto.core.session import Session

__all__ = [
    "Cluster",
    "Kubectl",
    "Session",
    "Svcat",
]
