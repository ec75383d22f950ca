"""Components for bulk file copying: MD5 checksums, descriptor I/O, file info and spec records."""

__version__ = "1.0.0"