"""File replacement shared by the dataset cache and the catalog writer."""

import os
import tempfile
from pathlib import Path


def replace_file(path: Path, content: bytes) -> None:
    """
    Write content to a temporary sibling of path, then swap it in.

    Readers see either the previous file or the complete new one. On
    failure the temporary file is removed and the previous file is left
    untouched.

    Raises:
        OSError: If the temporary file cannot be written or moved
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
