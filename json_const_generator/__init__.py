"""Turns JSON localization files into constant declarations at build time."""

from .classifier import Array, Scalar, classify_and_render, render_scalar
from .config import DEFAULT_NAMESPACE, ProjectConfig, load_style_sheet
from .errors import (
    ArrayContainsObject,
    ArrayRootContainsNonObject,
    DirectoryNotFound,
    DuplicateIdentifier,
    FileNotFoundForLanguage,
    GeneratorError,
    InvalidIdentifier,
    MalformedJson,
    MissingExtension,
    StyleSheetError,
    StyleSheetNotFound,
    UnreadableFile,
    UnsupportedExtension,
)
from .generator import (
    build_namespace,
    find_language_file,
    generate,
    generate_from_text,
    parse_from_file,
    render,
    write_generated,
)
from .meta import ConstantMeta, NamespaceMeta, ProjectMeta
from .naming import IdentifierPolicy, normalize_constant, normalize_namespace
from .values import parse_json

__all__ = [
    "Array",
    "Scalar",
    "classify_and_render",
    "render_scalar",
    "DEFAULT_NAMESPACE",
    "ProjectConfig",
    "load_style_sheet",
    "ArrayContainsObject",
    "ArrayRootContainsNonObject",
    "DirectoryNotFound",
    "DuplicateIdentifier",
    "FileNotFoundForLanguage",
    "GeneratorError",
    "InvalidIdentifier",
    "MalformedJson",
    "MissingExtension",
    "StyleSheetError",
    "StyleSheetNotFound",
    "UnreadableFile",
    "UnsupportedExtension",
    "build_namespace",
    "find_language_file",
    "generate",
    "generate_from_text",
    "parse_from_file",
    "render",
    "write_generated",
    "ConstantMeta",
    "NamespaceMeta",
    "ProjectMeta",
    "IdentifierPolicy",
    "normalize_constant",
    "normalize_namespace",
    "parse_json",
]
