"""Type classification and extension-method resolution."""

from apiscope.analysis.extensions import (
    can_extend,
    candidate_methods,
    extension_methods,
    extensions,
    is_extension_container,
)
from apiscope.analysis.kinds import Kind, classify

__all__ = [
    "Kind",
    "can_extend",
    "candidate_methods",
    "classify",
    "extension_methods",
    "extensions",
    "is_extension_container",
]
