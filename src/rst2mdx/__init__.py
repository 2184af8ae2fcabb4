"""rst2mdx: convert reStructuredText documentation into MDX."""

__version__ = "0.1.0"

from rst2mdx.conversion import (  # noqa: E402
    ConversionOptions,
    ConvertedFile,
    convert_file,
    convert_path,
    convert_rst_to_mdx,
)
from rst2mdx.exceptions import (  # noqa: E402
    ConversionError,
    InputNotFoundError,
    Rst2mdxError,
    UnsupportedInputError,
)
from rst2mdx.parser import ParsedDocument, parse_rst  # noqa: E402
from rst2mdx.renderer import render_mdx  # noqa: E402
from rst2mdx.schemas import ConversionResult, Diagnostic, DiagnosticKind  # noqa: E402

__all__ = [
    "ConversionError",
    "ConversionOptions",
    "ConversionResult",
    "ConvertedFile",
    "Diagnostic",
    "DiagnosticKind",
    "InputNotFoundError",
    "ParsedDocument",
    "Rst2mdxError",
    "UnsupportedInputError",
    "__version__",
    "convert_file",
    "convert_path",
    "convert_rst_to_mdx",
    "parse_rst",
    "render_mdx",
]
