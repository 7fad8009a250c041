"""Renderers producing the text of the generated `r.dart` file."""

from .builder import DartWriter
from .constants import FILE_HEADER, GENERATED_FILENAME, IGNORE_FOR_FILE
from .package_class import PackageClassRenderer
from .r_class import RClassRenderer

__all__ = [
    "DartWriter",
    "FILE_HEADER",
    "GENERATED_FILENAME",
    "IGNORE_FOR_FILE",
    "PackageClassRenderer",
    "RClassRenderer",
]
