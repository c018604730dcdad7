# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""Tests for dichromacy simulation."""

import numpy as np
import pytest

from luvtone.errors import InvalidColorInput
from luvtone.schema import BLACK, WHITE, DichromacyType, RGBColor
from luvtone.analyze.vision import (
    DICHROMACY_MATRICES,
    simulate_dichromacy,
    simulate_dichromacy_pixels,
)


class TestMatrices:

    def test_every_type_has_a_matrix(self):
        assert set(DICHROMACY_MATRICES) == set(DichromacyType)

    def test_rows_are_convex(self):
        for matrix in DICHROMACY_MATRICES.values():
            assert (matrix >= 0.0).all()
            np.testing.assert_allclose(matrix.sum(axis=1), 1.0, atol=1e-12)

    def test_read_only(self):
        with pytest.raises(ValueError):
            DICHROMACY_MATRICES[DichromacyType.PROTANOPIA][0, 0] = 1.0


class TestSimulateDichromacy:

    def test_protanopia_red(self):
        assert simulate_dichromacy("#FF0000", "protanopia").hex == "#918E00"

    def test_tritanopia_red(self):
        assert simulate_dichromacy("#FF0000", DichromacyType.TRITANOPIA) == RGBColor(242, 0, 0)

    @pytest.mark.parametrize("kind", list(DichromacyType))
    def test_neutrals_are_unchanged(self, kind):
        assert simulate_dichromacy(WHITE, kind) == WHITE
        assert simulate_dichromacy(BLACK, kind) == BLACK

    def test_rejects_unknown_type(self):
        with pytest.raises(InvalidColorInput) as excinfo:
            simulate_dichromacy("#FF0000", "monochromacy")
        assert excinfo.value.field == "type"


class TestPixelArrays:

    def test_shape_preserved(self):
        pixels = np.random.RandomState(3).randint(0, 256, size=(4, 5, 3))
        out = simulate_dichromacy_pixels(pixels, "deuteranopia")
        assert out.shape == (4, 5, 3)
        assert out.dtype.kind == "i"
        assert (out >= 0).all() and (out <= 255).all()

    def test_matches_single_color(self):
        pixels = np.array([[57, 65, 200], [255, 136, 0]])
        out = simulate_dichromacy_pixels(pixels, "protanopia")
        for row, rgb in zip(out, pixels):
            expected = simulate_dichromacy(RGBColor(*map(int, rgb)), "protanopia")
            assert tuple(int(v) for v in row) == expected.as_tuple()
