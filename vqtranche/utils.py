"""
Small file helpers shared by the tranche writers and readers.
"""
import os
import gzip


def expandedOpen(path, mode):
    try:
        return open(path, mode)
    except IOError:
        return open(os.path.expanduser(path), mode)


def Open(file_name, mode, compress_level=9):
    """
    Function that allows transparent usage of gzip and ordinary files.
    Gzip files are opened in text mode.
    """
    if file_name.endswith(".gz") or file_name.endswith(".GZ"):
        file_dir = os.path.dirname(file_name)
        if file_dir and not os.path.exists(file_dir):
            file_name = os.path.expanduser(file_name)

        return gzip.open(file_name, mode + 't', compresslevel=compress_level)
    else:
        return expandedOpen(file_name, mode)
