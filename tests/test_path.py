#!/usr/bin/python3
#-*- coding:utf-8 -*-


import pytest

from svgtoexc.convert.geometry import bounding_box, polygon_area
from svgtoexc.convert.transform import identity, parse_transform
from svgtoexc.convert.path import Subpath, flatten_path, decompose_path, classify_holes


def square(x, y, size, reverse=False):
	points = [(x, y), (x + size, y), (x + size, y + size), (x, y + size), (x, y)]
	return list(reversed(points)) if reverse else points


def test_straight_lines_are_kept():
	assert flatten_path('M 0 0 L 10 0 L 10 10') == [[(0, 0), (10, 0), (10, 10)]]


def test_horizontal_vertical_and_close():
	pieces = flatten_path('M0 0 H10 V10 H0 Z')
	assert pieces == [[(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]]


def test_relative_moveto_after_close_starts_at_subpath_start():
	pieces = flatten_path('m 10 10 l 10 0 l 0 10 z m 2 2 l 3 0')
	assert len(pieces) == 2
	assert pieces[0][0] == (10, 10)
	assert pieces[1] == [(12, 12), (15, 12)]


def test_relative_moveto_after_open_subpath():
	pieces = flatten_path('M 0 0 l 10 0 m 5 5 l 1 1')
	assert pieces[1] == [(15, 5), (16, 6)]


def test_implicit_lineto_after_absolute_moveto():
	assert flatten_path('M0,0 10,0 10,10') == [[(0, 0), (10, 0), (10, 10)]]
	assert flatten_path('M0 0 100 0 100 100 0 100 Z') == [square(0, 0, 100)]


def test_implicit_lineto_after_relative_moveto():
	pieces = flatten_path('M0 0 L10 0 L10 10 Z m 2 2 3 0 0 3 z')
	assert len(pieces) == 2
	assert pieces[1] == [(2, 2), (5, 2), (5, 5), (2, 2)]


def test_implicit_lineto_after_opening_relative_moveto():
	assert flatten_path('m 1 1 2 0 0 2') == [[(1, 1), (3, 1), (3, 3)]]


def test_zero_length_arc_drops_the_path():
	assert decompose_path('M 10 10 A 5 5 0 1 1 10 10', identity()) == []


def test_touching_subpaths_stay_separate():
	assert len(flatten_path('M0 0 L10 0 M10 0 L20 0')) == 2


def test_curves_are_flattened():
	piece, = flatten_path('M 0 0 C 0 50 100 50 100 0')
	assert len(piece) > 8
	assert piece[0] == (0, 0)
	assert piece[-1] == pytest.approx((100, 0))
	assert max(_y for (_x, _y) in piece) == pytest.approx(37.5, abs=0.5)


def test_arcs_are_flattened():
	piece, = flatten_path('M 0 0 A 10 10 0 0 1 20 0')
	assert piece[-1] == pytest.approx((20, 0))
	assert all(abs(((_x - 10) ** 2 + _y ** 2) ** 0.5 - 10) < 0.01 for (_x, _y) in piece)


def test_quadratic_and_smooth_curves():
	piece, = flatten_path('M 0 0 Q 5 10 10 0 T 20 0')
	assert piece[-1] == pytest.approx((20, 0))


@pytest.mark.parametrize('d', ['', '   ', 'nonsense', 'L 10 10', 'M 0 0 L', 'M 0', 'M 5 5', 'M 0 0 Z'])
def test_malformed_or_empty_path_gives_nothing(d):
	assert decompose_path(d, identity()) == []


def test_subpath_geometry_is_relative_to_origin():
	subpath = Subpath([(5, 5), (15, 5), (15, 25)])
	assert (subpath.x, subpath.y) == (5, 5)
	assert subpath.relative_points[0] == (0, 0)
	assert (subpath.width, subpath.height) == (10, 20)
	assert subpath.bbox == bounding_box([(5, 5), (15, 5), (15, 25)])
	assert not subpath.is_closed
	assert subpath.points == [(5, 5), (15, 5), (15, 25)]


def test_subpath_closed_within_epsilon():
	assert Subpath([(0, 0), (10, 0), (10, 10), (0.0001, 0)]).is_closed
	assert not Subpath([(0, 0), (10, 0), (10, 10), (0.01, 0)]).is_closed


def test_subpath_needs_two_points():
	with pytest.raises(ValueError):
		Subpath([(0, 0)])


def test_transform_applied_before_measuring():
	subpath, = decompose_path('M 0 0 L 10 0 L 10 10 Z', parse_transform('translate(100 50) scale(2)'))
	assert (subpath.x, subpath.y) == (100, 50)
	assert (subpath.width, subpath.height) == (20, 20)
	assert subpath.area == 200
	assert subpath.is_closed


def test_opposite_winding_inner_is_hole():
	outer, inner = decompose_path('M0 0 H100 V100 H0 Z M25 25 V75 H75 V25 Z', identity())
	assert outer.winding != inner.winding
	assert not outer.is_hole
	assert inner.is_hole


def test_same_winding_inner_inside_largest_is_hole():
	subpaths = classify_holes([Subpath(square(0, 0, 100)), Subpath(square(25, 25, 50))], evenodd=False)
	assert [_s.is_hole for _s in subpaths] == [False, True]


def test_nested_opposite_winding_is_hole():
	outer = Subpath(square(0, 0, 100))
	middle = Subpath(square(10, 10, 80, reverse=True))
	inner = Subpath(square(30, 30, 40, reverse=True))
	classify_holes([outer, middle, inner], evenodd=False)
	assert middle.is_hole
	# inside the largest one, which is a container for any winding
	assert inner.is_hole


def test_same_winding_nested_outside_largest():
	largest = Subpath(square(200, 0, 100))
	container = Subpath(square(0, 0, 80))
	inner = Subpath(square(20, 20, 40))
	
	classify_holes([largest, container, inner], evenodd=False)
	assert not inner.is_hole and not container.is_hole
	
	classify_holes([largest, container, inner], evenodd=True)
	assert inner.is_hole and not container.is_hole


def test_evenodd_accepts_any_winding():
	outer = Subpath(square(0, 0, 100))
	middle = Subpath(square(10, 10, 80))
	inner = Subpath(square(30, 30, 40))
	classify_holes([middle, inner, outer], evenodd=True)
	assert (outer.is_hole, middle.is_hole, inner.is_hole) == (False, True, True)


def test_disjoint_subpaths_are_not_holes():
	left, right = decompose_path('M0 0 H10 V10 H0 Z M50 0 H60 V10 H50 Z', identity())
	assert not left.is_hole and not right.is_hole


def test_single_subpath_never_hole():
	subpath, = decompose_path('M0 0 H10 V10 H0 Z', identity(), 'evenodd')
	assert not subpath.is_hole


def test_largest_never_hole():
	subpaths = decompose_path('M0 0 H100 V100 H0 Z M0 0 V100 H100 V0 Z M40 40 H60 V60 H40 Z', identity())
	largest = max(subpaths, key=lambda _s: _s.area)
	assert not largest.is_hole
	assert polygon_area(largest.relative_points) == 10000
