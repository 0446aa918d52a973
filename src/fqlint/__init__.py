"""fqlint: validation of FASTQ sequencing-read files.

The package provides a record model and reader, a pluggable validator
framework, and a CLI (`fqlint lint`) that reports format and content
violations with file/line/column precision.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
