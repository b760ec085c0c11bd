"""man_files - List manual page files under the standard man directories."""

__version__ = "0.1.0"
