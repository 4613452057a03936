"""Transform components for turning records into classified cases."""

from translitqa.core.components.transform.base import Transform
from translitqa.core.components.transform.classifier import (
    CaseBuilderTransform,
    CaseClassifier,
    MappingClassifier,
    NamingConventionClassifier,
)

__all__ = [
    "Transform",
    "CaseBuilderTransform",
    "CaseClassifier",
    "MappingClassifier",
    "NamingConventionClassifier",
]
