from __future__ import annotations

import math
from typing import Tuple

import pytest
import pytest_check as check
from colourblend import ConvertColour as CC

SAMPLES_RGB = [
    (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0),
    (0.2, 0.4, 0.6), (0.9, 0.1, 0.5), (0.5, 0.5, 0.5),
    (1.0, 1.0, 1.0), (0.05, 0.02, 0.01), (0.7, 0.65, 0.1),
]


def _check_close(got: Tuple[float, ...], expected: Tuple[float, ...], abs_: float = 1e-9) -> None:
    check.equal(len(got), len(expected))
    for g, e in zip(got, expected):
        check.almost_equal(g, e, abs=abs_, msg=f'{got} != {expected}')


def test_reference_white() -> None:
    _check_close(CC.rgb_to_xyz(1.0, 1.0, 1.0), (0.95047, 1.0000001, 1.08883), abs_=1e-9)
    xr, yr, zr = CC.D65_XYZ
    den = xr + 15 * yr + 3 * zr
    check.almost_equal(CC.UR, 4 * xr / den)
    check.almost_equal(CC.VR, 9 * yr / den)


def test_hsv_to_rgb_primaries() -> None:
    _check_close(CC.hsv_to_rgb(0, 1, 1), (1, 0, 0))
    _check_close(CC.hsv_to_rgb(120, 1, 1), (0, 1, 0))
    _check_close(CC.hsv_to_rgb(240, 1, 1), (0, 0, 1))
    _check_close(CC.hsv_to_rgb(60, 1, 1), (1, 1, 0))
    _check_close(CC.hsv_to_rgb(30, 1, 1), (1, 0.5, 0))
    _check_close(CC.hsv_to_rgb(0, 0, 0.4), (0.4, 0.4, 0.4))


def test_hsv_to_rgb_clamps_saturation_and_value() -> None:
    _check_close(CC.hsv_to_rgb(0, 2.0, 1.0), CC.hsv_to_rgb(0, 1.0, 1.0))
    _check_close(CC.hsv_to_rgb(200, 0.5, -1.0), (0, 0, 0))
    _check_close(CC.hsv_to_rgb(200, -3.0, 5.0), (1, 1, 1))


def test_hsl_to_rgb() -> None:
    _check_close(CC.hsl_to_rgb(0, 1, 0.5), (1, 0, 0))
    _check_close(CC.hsl_to_rgb(0, 0, 0.5), (0.5, 0.5, 0.5))
    _check_close(CC.hsl_to_rgb(120, 1, 0.25), (0, 0.5, 0))
    _check_close(CC.hsl_to_rgb(240, 1, 1.5), (1, 1, 1))


def test_rgb_to_hsv() -> None:
    _check_close(CC.rgb_to_hsv(1, 0, 0), (0, 1, 1))
    _check_close(CC.rgb_to_hsv(0, 1, 0), (120, 1, 1))
    _check_close(CC.rgb_to_hsv(0, 0, 1), (240, 1, 1))
    _check_close(CC.rgb_to_hsv(1, 0, 1), (300, 1, 1))
    _check_close(CC.rgb_to_hsv(0.5, 0.5, 0.5), (0, 0, 0.5))
    _check_close(CC.rgb_to_hsv(0, 0, 0), (0, 0, 0))


def test_rgb_to_hsl() -> None:
    _check_close(CC.rgb_to_hsl(1, 0, 0), (0, 1, 0.5))
    _check_close(CC.rgb_to_hsl(0.5, 0.25, 0.25), (0, 1 / 3, 0.375))
    _check_close(CC.rgb_to_hsl(1, 1, 1), (0, 0, 1))


@pytest.mark.parametrize('rgb', SAMPLES_RGB)
def test_hue_models_round_trip(rgb: Tuple[float, float, float]) -> None:
    _check_close(CC.hsv_to_rgb(*CC.rgb_to_hsv(*rgb)), rgb, abs_=1e-9)
    _check_close(CC.hsl_to_rgb(*CC.rgb_to_hsl(*rgb)), rgb, abs_=1e-9)


@pytest.mark.parametrize('rgb', SAMPLES_RGB)
def test_xyz_round_trip(rgb: Tuple[float, float, float]) -> None:
    _check_close(CC.xyz_to_rgb(*CC.rgb_to_xyz(*rgb)), rgb, abs_=1e-5)


@pytest.mark.parametrize('xyz', [(0.5, 0.3, 0.2), (0.95047, 1.0, 1.08883), (40.0, 21.0, 2.0), (1e-3, 2e-3, 5e-4)])
def test_lab_round_trip(xyz: Tuple[float, float, float]) -> None:
    _check_close(CC.lab_to_xyz(*CC.xyz_to_lab(*xyz)), xyz, abs_=1e-9)


@pytest.mark.parametrize('xyz', [(0.5, 0.3, 0.2), (0.95047, 1.0, 1.08883), (40.0, 21.0, 2.0), (1e-3, 2e-3, 5e-4)])
def test_luv_round_trip(xyz: Tuple[float, float, float]) -> None:
    _check_close(CC.luv_to_xyz(*CC.xyz_to_luv(*xyz)), xyz, abs_=1e-9)


def test_lab_reference_white() -> None:
    _check_close(CC.lab_to_xyz(100, 0, 0), CC.D65_XYZ, abs_=1e-9)
    _check_close(CC.xyz_to_lab(*CC.D65_XYZ), (100, 0, 0), abs_=1e-9)


def test_lab_linear_branch() -> None:
    # Below EPSILON, L is KAPPA * Y / Yr
    l, a, b = CC.xyz_to_lab(0.0, 0.5, 0.0)
    check.almost_equal(l, CC.KAPPA * 0.005)
    _check_close(CC.xyz_to_lab(0, 0, 0), (0, 0, 0), abs_=1e-12)


def test_luv_reference_white() -> None:
    _check_close(CC.xyz_to_luv(*CC.D65_XYZ), (100, 0, 0), abs_=1e-9)


def test_yxy() -> None:
    Y, x, y = CC.rgb_to_yxy(1.0, 1.0, 1.0)
    check.almost_equal(Y, 1.0, abs=1e-6)
    check.almost_equal(x, 0.3127, abs=1e-4)
    check.almost_equal(y, 0.3290, abs=1e-4)
    _check_close(CC.yxy_to_xyz(*CC.xyz_to_yxy(0.5, 0.3, 0.2)), (0.5, 0.3, 0.2))


def test_degenerate_inputs_propagate() -> None:
    Y, x, y = CC.xyz_to_yxy(0.0, 0.0, 0.0)
    check.equal(Y, 0.0)
    check.is_true(math.isnan(x))
    check.is_true(math.isnan(y))

    check.is_true(all(math.isnan(v) for v in CC.yxy_to_xyz(0.0, 0.3, 0.0)[::2]))
    check.is_false(all(map(math.isfinite, CC.yxy_to_rgb(1.0, 0.3, 0.0))))

    l, u, v = CC.xyz_to_luv(0.0, 0.0, 0.0)
    check.equal(l, 0.0)
    check.is_true(math.isnan(u))
    check.is_true(math.isnan(v))

    check.is_false(all(map(math.isfinite, CC.luv_to_xyz(0.0, 0.0, 0.0))))


def test_lch() -> None:
    _check_close(CC.lab_to_lch_ab(50, 0, 10), (50, 10, 90))
    _check_close(CC.lab_to_lch_ab(50, -10, 0), (50, 10, 180))
    _check_close(CC.lab_to_lch_ab(50, 0, -10), (50, 10, 270))
    _check_close(CC.lch_ab_to_lab(50, 10, 90), (50, 0, 10), abs_=1e-12)
    _check_close(CC.luv_to_lch_uv(*CC.lch_uv_to_luv(60, 25, 135)), (60, 25, 135), abs_=1e-9)


@pytest.mark.parametrize('rgb', [s for s in SAMPLES_RGB if s != (1.0, 1.0, 1.0) and s != (0.5, 0.5, 0.5)])
def test_rgb_lch_round_trip(rgb: Tuple[float, float, float]) -> None:
    _check_close(CC.lch_ab_to_rgb(*CC.rgb_to_lch_ab(*rgb)), rgb, abs_=1e-5)
    _check_close(CC.lch_uv_to_rgb(*CC.rgb_to_lch_uv(*rgb)), rgb, abs_=1e-5)
