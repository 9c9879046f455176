from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import re

import pysatl_ggd
from pysatl_ggd import __version__


def test_version_pep440() -> None:
    assert re.match(
        r"^\d+(\.\d+)*([abc]|rc)?\d*(\.post\d+)?(\.dev\d+)?$",
        __version__,
    )


def test_public_names_are_importable() -> None:
    for name in pysatl_ggd.__all__:
        assert hasattr(pysatl_ggd, name), name


def test_package_logger_has_null_handler() -> None:
    handlers = logging.getLogger("pysatl_ggd").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
