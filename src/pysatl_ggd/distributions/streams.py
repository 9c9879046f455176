"""
Random Streams
==============

Process-wide default random stream used at the public API boundary.

Sampling strategies never reach for a global generator themselves: they are
handed an explicit :class:`numpy.random.Generator`. Public entry points
(:func:`~pysatl_ggd.distributions.sampling.sample`,
``Distribution.sample``) accept ``rng=None`` and resolve it here.

Notes
-----
Callers sharing the default stream from several threads get interleaved
draws; use independent generators for reproducible concurrent sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

import numpy as np

type RNGLike = np.random.Generator | int | None
"""Generator, integer seed, or ``None`` for the default stream."""

_lock = threading.Lock()
_default: np.random.Generator | None = None


def default_rng() -> np.random.Generator:
    """
    Return the process-wide default generator, creating it on first use.

    Returns
    -------
    numpy.random.Generator
        Shared generator seeded from system entropy unless
        :func:`seed_default_rng` was called.
    """
    global _default
    if _default is None:
        with _lock:
            if _default is None:
                _default = np.random.default_rng()
    return _default


def seed_default_rng(seed: int | None = None) -> np.random.Generator:
    """
    Replace the process-wide default generator with a freshly seeded one.

    Parameters
    ----------
    seed : int or None, optional
        Seed for the new generator. ``None`` draws fresh system entropy.

    Returns
    -------
    numpy.random.Generator
        The new default generator.
    """
    global _default
    with _lock:
        _default = np.random.default_rng(seed)
        return _default


def resolve_rng(rng: RNGLike = None) -> np.random.Generator:
    """
    Turn an API-level ``rng`` argument into a generator.

    Parameters
    ----------
    rng : numpy.random.Generator, int or None
        Explicit generator (returned as is), integer seed (a new generator is
        built from it), or ``None`` for the process-wide default stream.

    Returns
    -------
    numpy.random.Generator
    """
    if rng is None:
        return default_rng()
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)
