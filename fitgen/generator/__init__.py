"""fitgen field type code generator."""

from .compiler import CompileError as CompileError
from .compiler import GeneratedFieldType as GeneratedFieldType
from .compiler import Registry as Registry
from .compiler import RegistryTag as RegistryTag
from .compiler import build_registry as build_registry
from .compiler import compile_field_type as compile_field_type
from .compiler import compile_profile as compile_profile
from .compiler import is_true_enum as is_true_enum
from .config import GeneratorConfig as GeneratorConfig
from .config import load_config as load_config
from .types import *
