"""
Kiln - TypeScript web component scaffolding

Creates a component project folder from templates, with the component name
substituted in kebab-case and UpperCamelCase.
"""

__version__ = "0.1.0"

from kiln.config import KilnConfig
from kiln.errors import (
    DependencyInstallFailed,
    FolderAlreadyExists,
    InvalidComponentName,
    RepositoryInitFailed,
    ScaffoldError,
)
from kiln.generator import ComponentGenerator, GenerationResult, generate_component
from kiln.naming import CaseStyle, ComponentName, classify, to_kebab, to_upper_camel

__all__ = [
    "CaseStyle",
    "ComponentGenerator",
    "ComponentName",
    "DependencyInstallFailed",
    "FolderAlreadyExists",
    "GenerationResult",
    "InvalidComponentName",
    "KilnConfig",
    "RepositoryInitFailed",
    "ScaffoldError",
    "classify",
    "generate_component",
    "to_kebab",
    "to_upper_camel",
]
