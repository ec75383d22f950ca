# bbxfer

Building blocks for a bulk file copier. Each module can be used on its own;
the package has no third-party dependencies.

## Modules

- `bbxfer.md5`: `MD5`, an MD5 engine written in pure Python, and
  `md5_digest(data)`. `MD5` offers `update(data)`, `current()` (the digest so
  far, leaving the state untouched), `final()` (the digest, then a fresh
  start), `reset()`, `compute(data)` and `check(data, expected)`.
- `bbxfer.hashmd5`: `LibMD5`, the same interface backed by `hashlib.md5`.
- `bbxfer.fileinfo`: `FileInfo`, a dataclass holding file id (inode), size,
  permission bits, access/modify/change times, group name and object type
  (`'d'` directory, `'f'` regular file, `'p'` pipe, `'?'` anything else), with
  `FileInfo.from_stat(st, group)`; and `stat_path(path, follow_links=True)`,
  which looks the group name up and raises `OSError` when the path cannot be
  examined.
- `bbxfer.fdio`: `FdIO`, reading and writing a raw file descriptor.
  `read(size)` keeps reading until `size` bytes or end of file;
  `write(data, offset=None)` writes everything, positionally when an offset is
  given; `readv` and `writev` do scatter/gather I/O. Interrupted calls are
  retried, other errors raise `OSError`. `io_stats()` returns the bytes moved
  and the seconds spent, `position` tracks the offset, `seek(offset)` moves it,
  and `log(read_key, write_key)` turns on `START_<key>_READ`/`END_<key>_READ`
  (and `..._WRITE`) debug records through the `logging` module. `FdIO` is a
  context manager that closes the descriptor on exit.
- `bbxfer.nullio`: `NullIO`, a `FdIO` that discards writes, reads back zero
  bytes, ignores `seek` and `close`, and still keeps the byte count.
- `bbxfer.specformat`: `encode_spec(record)` and `decode_spec(line, source)`
  for the one-line record describing a file, held in a `SpecRecord`
  (`seqno`, `filename`, `info`). The line carries sequence number, object
  type, file id, octal mode, size, hexadecimal access and modify times, group
  and file name. Blanks in names travel as the `0x1a` character; an
  upper-case object type tells the receiver to turn them back into blanks in
  the file name. A line that cannot be decoded raises `SpecDecodeError`
  (a `ValueError`), whose `item` names the first item that failed.

## Install

```
pip install .
```

## Example

```python
from bbxfer.md5 import md5_digest
from bbxfer.fileinfo import FileInfo
from bbxfer.specformat import SpecRecord, decode_spec, encode_spec

print(md5_digest(b"abc").hex())  # 900150983cd24fb0d6963f7d28e17f72

record = SpecRecord(
    seqno=1,
    filename="my file",
    info=FileInfo(fileid=42, size=10, mode=0o644, atime=0, mtime=0,
                  group="staff", otype="f"),
)
line = encode_spec(record)       # "1 F 42 644 10 0 0 staff my\x1afile\n"
back = decode_spec(line, "peer")
print(back.filename, back.info.otype)  # my file f
```

## What it does not do

This package contains no copy program and no command: it does not open
network connections, parse `user@host:path` specifications, resolve host
addresses, or decide how a target file is created, appended to or finalised.
It provides the checksum, descriptor I/O, file description and record
format pieces such a program is built from.

## Tests

```
pip install .[test]
pytest
```