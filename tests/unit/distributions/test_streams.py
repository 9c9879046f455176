from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np

from pysatl_ggd.distributions import default_rng, resolve_rng, seed_default_rng


class TestStreams:
    def test_default_rng_is_shared(self) -> None:
        assert default_rng() is default_rng()
        assert isinstance(default_rng(), np.random.Generator)

    def test_seed_replaces_default(self) -> None:
        seeded = seed_default_rng(42)
        assert default_rng() is seeded
        assert seeded.random() == np.random.default_rng(42).random()

    def test_resolve_none_uses_default(self) -> None:
        assert resolve_rng(None) is default_rng()

    def test_resolve_generator_passthrough(self) -> None:
        gen = np.random.default_rng(0)
        assert resolve_rng(gen) is gen

    def test_resolve_seed_builds_fresh_generator(self) -> None:
        first = resolve_rng(7)
        second = resolve_rng(7)
        assert first is not second
        assert first.random() == second.random()
