"""Reading program images from disk"""

import logging
from pathlib import Path
from typing import Union

from .errors import FileUnreadable

logger = logging.getLogger(__name__)


def read_rom(path: Union[str, Path]) -> bytes:
    """Load ROM from file

    The file is raw bytes with no header. Raises :class:`FileUnreadable`
    for I/O problems; the size limit is enforced by
    :meth:`Interpreter.load_program`.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileUnreadable(str(path), e.strerror or str(e)) from e

    logger.info("Read %s (%d bytes)", Path(path).name, len(data))
    return data
