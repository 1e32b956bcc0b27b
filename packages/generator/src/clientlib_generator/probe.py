"""Existence checks for generated clientlib paths."""

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def file_exists(path: PathLike) -> bool:
    """Check whether ``path`` is accessible right now.

    Never raises: any failure to stat the path counts as non-existence.
    """
    try:
        os.stat(path)
    except (OSError, ValueError, TypeError):
        return False
    return True
