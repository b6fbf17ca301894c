#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'Subpath', 'flatten_path', 'decompose_path', 'classify_holes'


import re
from logging import getLogger
from os import environ
from svgpathtools import parse_path, Path, Line

if __name__ == '__main__':
	from svgtoexc.convert.geometry import bounding_box, dimensions, polygon_area, winding, contains, distance
	from svgtoexc.convert.transform import transform_points
else:
	from .geometry import bounding_box, dimensions, polygon_area, winding, contains, distance
	from .transform import transform_points


logger = getLogger(__name__)


FLATTEN_TOLERANCE = float(environ.get('SVGTOEXC_CURVE_TOLERANCE', '0.15'))
FLATTEN_MIN_DEPTH = 2
FLATTEN_MAX_DEPTH = 10

CLOSE_EPSILON = 0.001


_re_moveto = re.compile(r'(?=[Mm])')
_p_number = r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?'
_re_number = re.compile(_p_number)


class Subpath:
	"One contiguous piece of a path, in document coordinates, kept relative to its first point."
	
	def __init__(self, points):
		if len(points) < 2:
			raise ValueError("A subpath needs at least 2 points.")
		
		self.x, self.y = points[0]
		self.relative_points = [(_x - self.x, _y - self.y) for (_x, _y) in points]
		self.width, self.height = dimensions(self.relative_points)
		self.bbox = bounding_box(points)
		self.area = polygon_area(self.relative_points)
		self.winding = winding(self.relative_points)
		self.is_closed = distance(self.relative_points[0], self.relative_points[-1]) < CLOSE_EPSILON
		self.is_hole = False
	
	@property
	def points(self):
		"Absolute points."
		return [(self.x + _x, self.y + _y) for (_x, _y) in self.relative_points]
	
	def __repr__(self):
		return f'<Subpath at ({self.x}, {self.y}) {len(self.relative_points)} points, area={self.area}, {self.winding.value}{", closed" if self.is_closed else ""}{", hole" if self.is_hole else ""}>'


def _deviation(p0, p1, pm):
	"Distance of `pm` from the chord p0-p1."
	chord = p1 - p0
	if abs(chord) == 0:
		return abs(pm - p0)
	return abs((pm - p0).real * chord.imag - (pm - p0).imag * chord.real) / abs(chord)


def _flatten_segment(segment, t0, t1, out, depth):
	p0 = segment.point(t0)
	p1 = segment.point(t1)
	tm = (t0 + t1) / 2
	pm = segment.point(tm)
	if depth >= FLATTEN_MIN_DEPTH and (depth >= FLATTEN_MAX_DEPTH or _deviation(p0, p1, pm) <= FLATTEN_TOLERANCE):
		out.append(p1)
		return
	_flatten_segment(segment, t0, tm, out, depth + 1)
	_flatten_segment(segment, tm, t1, out, depth + 1)


def _flatten_subpath(path, offset):
	points = [path[0].start]
	for segment in path:
		if isinstance(segment, Line):
			points.append(segment.end)
		else:
			_flatten_segment(segment, 0, 1, points, 0)
	return [((_p + offset).real, (_p + offset).imag) for _p in points]


def flatten_path(d):
	"""Flatten a path command string into a list of point lists, one per subpath, in user coordinates.
	
	Lines are kept as they are, curves and arcs are subdivided until the midpoint of every piece
	lies within `FLATTEN_TOLERANCE` of its chord. Raises `ValueError` or `IndexError` on malformed data
	and `AssertionError` on a zero-length arc.
	"""
	
	subpaths = []
	current = 0j
	first = True
	
	for chunk in _re_moveto.split(d):
		chunk = chunk.strip()
		if not chunk:
			continue
		if chunk[0] not in 'Mm':
			raise ValueError(f"Path data must begin with a moveto: {chunk[:16]!r}.")
		
		# A relative moveto that opens the path is absolute.
		offset = current if (chunk[0] == 'm' and not first) else 0j
		first = False
		
		coords = _re_number.findall(chunk, 1)
		if len(coords) < 2:
			raise ValueError(f"Moveto without coordinates: {chunk[:16]!r}.")
		start = complex(float(coords[0]), float(coords[1])) + offset
		
		# Numbers after the first pair are drawing commands, explicit or implicit lineto.
		if len(coords) > 2:
			path = parse_path(chunk)
		else:
			path = Path()
		
		for piece in path.continuous_subpaths():
			if len(piece):
				subpaths.append(_flatten_subpath(piece, offset))
		
		if chunk[-1] in 'Zz' or not len(path):
			current = start
		else:
			current = path[-1].end + offset
	
	return subpaths


def classify_holes(subpaths, evenodd):
	"Mark subpaths that cut a hole into an enclosing sibling. The largest one (first on ties) is never a hole."
	
	if len(subpaths) < 2:
		return subpaths
	
	largest = max(range(len(subpaths)), key=lambda _n: subpaths[_n].area)
	
	for n, subpath in enumerate(subpaths):
		if n == largest:
			continue
		
		for m, container in enumerate(subpaths):
			if m == n:
				continue
			
			compatible = evenodd or (subpath.winding != container.winding) or (m == largest)
			if contains(subpath.bbox, container.bbox) and subpath.area < container.area and compatible:
				subpath.is_hole = True
				break
	
	return subpaths


def decompose_path(d, matrix, fill_rule='nonzero'):
	"Split a path into transformed `Subpath`s with hole status. Malformed data gives an empty list."
	
	if not d or not d.strip():
		return []
	
	try:
		flattened = flatten_path(d)
	except (ValueError, IndexError, ZeroDivisionError, AssertionError) as error:
		logger.debug(f"Skipping malformed path data {d[:32]!r}: {error}")
		return []
	
	subpaths = [Subpath(transform_points(_points, matrix)) for _points in flattened if len(_points) >= 2]
	return classify_holes(subpaths, (fill_rule or '').strip().lower() == 'evenodd')


if __debug__ and __name__ == '__main__':
	from svgtoexc.convert.transform import identity, parse_transform
	
	print("path")
	
	pieces = flatten_path('M0 0 L10 0 L10 10 Z m 2 2 l 3 0 l 0 3 z')
	assert len(pieces) == 2
	assert pieces[1][0] == (2, 2), pieces[1]
	
	pieces = flatten_path('M0 0 L10 0 M10 0 L20 0')
	assert len(pieces) == 2
	
	pieces = flatten_path('M0 0 L10 0 L10 10 Z m 2 2 3 0 0 3 z')
	assert pieces[1] == [(2, 2), (5, 2), (5, 5), (2, 2)], pieces[1]
	
	pieces = flatten_path('M0 0 C 0 10 10 10 10 0')
	assert len(pieces[0]) > 4
	assert pieces[0][-1] == (10, 0)
	
	subpaths = decompose_path('M0 0 H100 V100 H0 Z M25 25 V75 H75 V25 Z', identity())
	assert len(subpaths) == 2
	assert all(_s.is_closed for _s in subpaths)
	assert not subpaths[0].is_hole and subpaths[1].is_hole
	assert subpaths[0].winding != subpaths[1].winding
	
	subpaths = decompose_path('M0 0 L10 0', parse_transform('translate(5 5)'))
	assert (subpaths[0].x, subpaths[0].y) == (5, 5) and not subpaths[0].is_closed
	
	assert decompose_path('M 0 0 L', identity()) == []
	assert decompose_path('nonsense', identity()) == []
	assert decompose_path('M 5 5', identity()) == []
	assert decompose_path('M 10 10 A 5 5 0 1 1 10 10', identity()) == []
