#!/usr/bin/env python3
"""
wcat.py
Concatenate files to stdout, in the order given on the command line.

    wcat a.txt b.txt > both.txt

Exits 0 on success (or when no files are given) and 1 on the first file
that cannot be opened, after printing "wcat: cannot open file" to stdout.
"""

import logging
import os
import sys

log = logging.getLogger(__name__)

# One slot of the original buffer is reserved for the terminator
MAX_LINE_LENGTH = 1000
CHUNK_SIZE = MAX_LINE_LENGTH - 1

OPEN_ERROR_MESSAGE = b"wcat: cannot open file\n"

# 128 + SIGPIPE, what a shell reports for a reader that went away
BROKEN_PIPE_EXIT = 141


class FileOpenError(Exception):
    def __init__(self, path, cause):
        super().__init__(f"cannot open {path}: {cause}")
        self.path = path
        self.cause = cause


def open_file(path):
    try:
        return open(path, 'rb')
    except OSError as e:
        raise FileOpenError(path, e) from e


def read_chunks(f, size=CHUNK_SIZE):
    """
    Yield line-bounded chunks of at most `size` bytes until end-of-file.
    A failed read is treated the same as end-of-file.
    """
    while True:
        try:
            chunk = f.readline(size)
        except OSError as e:
            log.debug("read failed on %s, treating as end-of-file: %s", getattr(f, 'name', f), e)
            return
        if not chunk:
            return
        # stands in for forcing the terminator byte; readline already honours size
        yield chunk[:size]


def concatenate(path, out):
    with open_file(path) as infile:
        for chunk in read_chunks(infile):
            out.write(chunk)


def run(args, stdout=None):
    out = sys.stdout.buffer if stdout is None else stdout
    if not args:
        return 0

    try:
        for path in args:
            log.debug("concatenating %s", path)
            concatenate(path, out)
    except FileOpenError as e:
        log.debug("cannot open %s: %s", e.path, e.cause)
        out.write(OPEN_ERROR_MESSAGE)
        return 1
    finally:
        out.flush()
    return 0


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        return run(list(argv))
    except BrokenPipeError:
        # Keep the interpreter's final flush of stdout from failing again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return BROKEN_PIPE_EXIT


if __name__ == "__main__":
    sys.exit(main())
