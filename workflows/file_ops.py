"""File helpers shared by the .env and docker-compose.yml editors"""

import os
import shutil
import tempfile


def backup_file(path, backup_path):
    """Copy path to backup_path byte for byte, overwriting any previous backup"""
    shutil.copyfile(path, backup_path)


def atomic_write_text(path, content: str):
    """
    Replace the content of path without leaving a half-written file behind.

    The new content goes to a temporary file in the same directory which is
    then renamed over the target. The original file mode is kept.
    """
    path = str(path)
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix='.tmp-', dir=directory)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as tmp:
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        if os.path.exists(path):
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def read_text(path) -> str:
    """Read a text file keeping its line endings untouched"""
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()
