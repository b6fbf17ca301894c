#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'BoundingBox', 'Winding', 'signed_area', 'polygon_area', 'winding', 'bounding_box', 'dimensions', 'contains', 'distance'


import math
from collections import namedtuple
from enum import Enum


distance = math.dist


class BoundingBox(namedtuple('BoundingBox', 'min_x min_y max_x max_y')):
	__slots__ = ()
	
	@property
	def width(self):
		return self.max_x - self.min_x
	
	@property
	def height(self):
		return self.max_y - self.min_y
	
	@property
	def area(self):
		return self.width * self.height
	
	@property
	def center(self):
		return (self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2


class Winding(Enum):
	CLOCKWISE = 'clockwise'
	COUNTER_CLOCKWISE = 'counter-clockwise'


def signed_area(points):
	"Raw shoelace sum over the closed polygon, twice the signed area. Positive for clockwise order."
	
	total = 0
	count = len(points)
	for n in range(count):
		x1, y1 = points[n]
		x2, y2 = points[(n + 1) % count]
		total += (x2 - x1) * (y2 + y1)
	return total


def polygon_area(points):
	return abs(signed_area(points) / 2)


def winding(points):
	return Winding.CLOCKWISE if signed_area(points) > 0 else Winding.COUNTER_CLOCKWISE


def bounding_box(points):
	if not points:
		return BoundingBox(0, 0, 0, 0)
	
	xs = [_x for (_x, _y) in points]
	ys = [_y for (_x, _y) in points]
	return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def dimensions(points):
	box = bounding_box(points)
	return box.width, box.height


def contains(inner, outer, tolerance=2, ratio=0.9):
	"""Approximate containment of bounding box `inner` in `outer`.
	
	True when the center of `inner` lies within `outer` grown by `tolerance` on every side,
	and the area of `inner` is less than `ratio` times the area of `outer`.
	"""
	
	cx, cy = inner.center
	center_inside = (outer.min_x - tolerance <= cx <= outer.max_x + tolerance) and (outer.min_y - tolerance <= cy <= outer.max_y + tolerance)
	return center_inside and inner.area < outer.area * ratio


if __debug__ and __name__ == '__main__':
	print("geometry")
	
	square = [(0, 0), (10, 0), (10, 10), (0, 10)]
	assert polygon_area(square) == 100
	assert winding(square) != winding(list(reversed(square)))
	assert bounding_box(square) == BoundingBox(0, 0, 10, 10)
	assert bounding_box([]) == BoundingBox(0, 0, 0, 0)
	assert dimensions([(1, 2), (4, -2)]) == (3, 4)
	assert contains(BoundingBox(2, 2, 8, 8), BoundingBox(0, 0, 10, 10))
	assert not contains(BoundingBox(0, 0, 10, 10), BoundingBox(0, 0, 10, 10))
