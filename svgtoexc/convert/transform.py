#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'identity', 'matrix', 'parse_transform', 'own_transform', 'accumulated_transform', 'transform_point', 'transform_points'


import re
import math
from logging import getLogger
import numpy as np

if __name__ == '__main__':
	from svgtoexc.format.xml import local_name
else:
	from ..format.xml import local_name


logger = getLogger(__name__)


def identity():
	return np.identity(3)


def matrix(a, b, c, d, e, f):
	"Affine matrix from the six SVG coefficients, mapping (x, y) to (a*x + c*y + e, b*x + d*y + f)."
	return np.array([[a, c, e], [b, d, f], [0, 0, 1]], dtype=float)


def _translate(tx, ty=0):
	return matrix(1, 0, 0, 1, tx, ty)


def _scale(sx, sy=None):
	return matrix(sx, 0, 0, sx if sy is None else sy, 0, 0)


def _rotate(angle, cx=0, cy=0):
	a = math.radians(angle)
	rotation = matrix(math.cos(a), math.sin(a), -math.sin(a), math.cos(a), 0, 0)
	if cx or cy:
		return _translate(cx, cy) @ rotation @ _translate(-cx, -cy)
	return rotation


def _skew_x(angle):
	return matrix(1, 0, math.tan(math.radians(angle)), 1, 0, 0)


def _skew_y(angle):
	return matrix(1, math.tan(math.radians(angle)), 0, 1, 0, 0)


_p_number = r'[+-]?(?:\d+\.?\d*|\d*\.?\d+)(?:[eE][+-]?\d+)?' # regex pattern matching a floating point number
_re_function = re.compile(r'\s*,?\s*([a-zA-Z]+)\s*\(([^()]*)\)')
_re_separator = re.compile(r'[\s,]*')
_re_argument = re.compile(fr'\s*({_p_number})\s*,?')

_functions = {
	'matrix': ((6,), matrix),
	'translate': ((1, 2), _translate),
	'scale': ((1, 2), _scale),
	'rotate': ((1, 3), _rotate),
	'skewx': ((1,), _skew_x),
	'skewy': ((1,), _skew_y),
}


def _parse_arguments(text):
	args = []
	n = 0
	while n < len(text):
		if text[n:].isspace():
			break
		match = _re_argument.match(text, n)
		if not match or match.end() == n:
			raise ValueError(f"Malformed transform arguments: {text!r}.")
		args.append(float(match.group(1)))
		n = match.end()
	return args


def parse_transform(text):
	"""Parse a transform declaration into one matrix.
	
	Functions are composed left to right, so the rightmost one is applied to a point first.
	Raises `ValueError` on any unparseable part.
	"""
	
	result = identity()
	if not text:
		return result
	
	n = 0
	while True:
		match = _re_function.match(text, n)
		if not match:
			break
		
		name = match.group(1).lower()
		try:
			arities, function = _functions[name]
		except KeyError:
			raise ValueError(f"Unsupported transformation: {match.group(1)}.")
		
		args = _parse_arguments(match.group(2))
		if len(args) not in arities:
			raise ValueError(f"Wrong number of arguments to {match.group(1)}: {len(args)}.")
		
		result = result @ function(*args)
		n = match.end()
	
	if _re_separator.fullmatch(text, n) is None:
		raise ValueError(f"Unsupported transformation: {text[n:]}.")
	
	return result


def own_transform(node):
	"The node's own `transform` as a matrix; identity when absent or malformed."
	
	text = node.get_attribute('transform')
	if not text:
		return identity()
	
	try:
		return parse_transform(text)
	except ValueError as error:
		logger.debug(f"Ignoring transform on <{node.name}>: {error}")
		return identity()


def accumulated_transform(node):
	"Compose own transforms from the outermost ancestor below the nearest <svg> down to `node` itself."
	
	result = identity()
	current = node
	while current is not None and local_name(current.tag) != 'svg':
		result = own_transform(current) @ result
		current = current.getparent()
	return result


def transform_points(points, m):
	if not len(points):
		return []
	homogeneous = np.column_stack([np.asarray(points, dtype=float), np.ones(len(points))])
	return [(float(_x), float(_y)) for (_x, _y, _) in homogeneous @ m.T]


def transform_point(point, m):
	return transform_points([point], m)[0]


if __debug__ and __name__ == '__main__':
	print("transform")
	
	def close(p, q):
		return all(abs(_a - _b) < 1e-9 for (_a, _b) in zip(p, q))
	
	assert close(transform_point((1, 1), parse_transform('translate(10, 5) scale(2)')), (12, 7))
	assert close(transform_point((1, 1), parse_transform('scale(2) translate(10 5)')), (22, 12))
	assert close(transform_point((1, 0), parse_transform('rotate(90)')), (0, 1))
	assert close(transform_point((2, 1), parse_transform('rotate(180 1 1)')), (0, 1))
	assert close(transform_point((0, 1), parse_transform('skewX(45)')), (1, 1))
	assert close(transform_point((1, 2), parse_transform('matrix(1,0,0,1,3,4)')), (4, 6))
	assert (parse_transform('') == identity()).all()
	
	for bad in ['translate(1 2', 'spin(30)', 'scale()', 'translate(1) junk', 'rotate(1 2)']:
		try:
			parse_transform(bad)
		except ValueError:
			pass
		else:
			raise AssertionError(bad)
