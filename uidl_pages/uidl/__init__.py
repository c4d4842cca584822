"""UIDL document model, parser, and validator.

Examples
--------
>>> from uidl_pages.uidl import Validator, parse_component_json
>>> doc = {"name": "HomePage", "node": {"type": "container"}}
>>> Validator().validate_component_schema(doc).valid
True
>>> parse_component_json(doc).node.type
'container'
"""

from .models import (
    CONDITIONAL,
    REPEAT,
    STRUCTURAL_TYPES,
    ComponentDependency,
    ComponentMeta,
    ComponentSEO,
    ComponentUIDL,
    GlobalAsset,
    ProjectGlobals,
    ProjectUIDL,
    UIDLNode,
    walk,
)
from .parser import parse_component_json, parse_project_json
from .validator import ValidationResult, Validator

__all__ = [
    "CONDITIONAL",
    "REPEAT",
    "STRUCTURAL_TYPES",
    "ComponentDependency",
    "ComponentMeta",
    "ComponentSEO",
    "ComponentUIDL",
    "GlobalAsset",
    "ProjectGlobals",
    "ProjectUIDL",
    "UIDLNode",
    "ValidationResult",
    "Validator",
    "parse_component_json",
    "parse_project_json",
    "walk",
]
