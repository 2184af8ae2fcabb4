"""Custom exceptions for rst2mdx."""


class Rst2mdxError(Exception):
    """Base exception for rst2mdx operations."""


class InputNotFoundError(Rst2mdxError):
    """Input file or directory does not exist."""


class UnsupportedInputError(Rst2mdxError):
    """Input file is not a reStructuredText document."""


class ConversionError(Rst2mdxError):
    """Error while reading a source document or writing its MDX output."""
