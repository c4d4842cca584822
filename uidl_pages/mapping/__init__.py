"""Mapping tables from abstract UIDL element types to concrete tags.

The bundled ``html.yaml`` table is the base layer; extra tables loaded with
:func:`load_mapping_table` or built with :func:`build_mapping_table` shadow it.
"""

from .loader import (
    BASE_MAPPING_PATH,
    build_mapping_table,
    load_base_mapping,
    load_mapping_table,
)
from .models import STYLE_STRATEGIES, MappingEntry, MappingTable, StyleStrategy

__all__ = [
    "BASE_MAPPING_PATH",
    "STYLE_STRATEGIES",
    "MappingEntry",
    "MappingTable",
    "StyleStrategy",
    "build_mapping_table",
    "load_base_mapping",
    "load_mapping_table",
]
