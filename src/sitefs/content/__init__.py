"""
Content discovery for static sites.

Provides tools for:
- Scanning content and layout directories
- Pairing content files with their .yaml meta files
- Deriving identifiers from file paths
- Parsing front matter and metadata
- Writing new items and layouts
"""

from sitefs.content.assembler import ContentObject, LoadResult, ObjectKind, assemble
from sitefs.content.datasource import FilesystemDataSource
from sitefs.content.identifiers import identifier_for, strip_extension
from sitefs.content.pairing import FilePairing, filename_for, group_files
from sitefs.content.parser import parse, split_front_matter
from sitefs.content.reader import read_text
from sitefs.content.scanner import scan_files
from sitefs.content.writer import create_object

__all__ = [
    "FilesystemDataSource",
    "ContentObject",
    "LoadResult",
    "ObjectKind",
    "FilePairing",
    "assemble",
    "create_object",
    "filename_for",
    "group_files",
    "identifier_for",
    "parse",
    "read_text",
    "scan_files",
    "split_front_matter",
    "strip_extension",
]
