"""Pipeline components for loading cases and recording results."""

# Common base classes
from translitqa.core.components.common import Component, ComponentResult

# Reader components
from translitqa.core.components.readers import (
    Reader,
    CaseTableReader,
    parse_records,
    split_record,
)

# Transform components
from translitqa.core.components.transform import (
    Transform,
    CaseBuilderTransform,
    CaseClassifier,
    MappingClassifier,
    NamingConventionClassifier,
)

# Writer components
from translitqa.core.components.writers import (
    Writer,
    CsvResultSink,
    RESULTS_HEADER,
    escape_field,
    format_row,
)

__all__ = [
    # Base classes
    "Component",
    "ComponentResult",
    "Reader",
    "Transform",
    "Writer",
    # Readers
    "CaseTableReader",
    "parse_records",
    "split_record",
    # Transforms
    "CaseBuilderTransform",
    "CaseClassifier",
    "MappingClassifier",
    "NamingConventionClassifier",
    # Writers
    "CsvResultSink",
    "RESULTS_HEADER",
    "escape_field",
    "format_row",
]
