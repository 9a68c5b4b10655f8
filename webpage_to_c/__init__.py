"""
Embed a compiled static website into C/C++ sources for ESP32/ESP8266 web servers.
"""

from .errors import (
    ContentTypeError, FileNameEncodingError, IdentifierCollisionError, OutputDirectoryError,
    SourceDirectoryError, WebsiteGenError
)
from .frameworks import VARIANTS, FrameworkVariant, get_variant
from .generator import WebsiteGenerator
from .identifiers import find_collisions, format_name
from .models import Asset, Framework, GeneratorConfig, RouteTable
from .pipeline import generate_website
from .scanner import SourceReader, TreeScanner, resolve_content_type

__version__ = "1.0.0"
