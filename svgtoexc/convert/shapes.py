#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'ShapeSynthesizer', 'parse_points'


import re
from logging import getLogger

if __name__ == '__main__':
	from svgtoexc.format.xml import local_name
	from svgtoexc.convert.geometry import bounding_box
	from svgtoexc.convert.transform import accumulated_transform, transform_points, transform_point
	from svgtoexc.convert.style import parse_number, TRANSPARENT
	from svgtoexc.convert.path import decompose_path
	from svgtoexc.convert.elements import Arrowhead, LINE_HEIGHT
else:
	from ..format.xml import local_name
	from .geometry import bounding_box
	from .transform import accumulated_transform, transform_points, transform_point
	from .style import parse_number, TRANSPARENT
	from .path import decompose_path
	from .elements import Arrowhead, LINE_HEIGHT


logger = getLogger(__name__)


DEFAULT_FONT_SIZE = 20
CHARACTER_WIDTH = 0.6
ASCENT = 0.8


_re_point_number = re.compile(r'[-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?')


def parse_points(text):
	"Pairs of numbers from a `points` attribute. A trailing odd number is dropped."
	
	if not text:
		return []
	numbers = [float(_n) for _n in _re_point_number.findall(text)]
	return list(zip(numbers[0::2], numbers[1::2]))


class ShapeSynthesizer:
	"""Turns supported SVG shape nodes into scene elements.
	
	Every `synthesize_*` method takes one node and returns a list of zero or more elements.
	"""
	
	def __init__(self, style, factory):
		self.style = style
		self.factory = factory
	
	def synthesize(self, node):
		try:
			method = self.synthesizers[local_name(node.tag)]
		except KeyError:
			logger.debug(f"No synthesizer for <{local_name(node.tag)}>.")
			return []
		return method(self, node)
	
	def number_attribute(self, node, attr, default=0):
		return parse_number(node.get_attribute(attr), default)
	
	def stroke_width(self, node):
		return self.style.resolve_number(node, 'stroke-width', 1)
	
	def arrowheads(self, node):
		start = Arrowhead.from_marker(self.style.resolve(node, 'marker-start'))
		end = Arrowhead.from_marker(self.style.resolve(node, 'marker-end'))
		return start, end
	
	def paint(self, node, **overrides):
		"Keyword arguments with the resolved colors and stroke width of `node`, for the element factory."
		
		style = {
			'stroke_color': self.style.resolve_stroke(node),
			'background_color': self.style.resolve_fill(node),
			'stroke_width': self.stroke_width(node)
		}
		style.update(overrides)
		return style
	
	def line_or_arrow(self, node, points, close=False, **overrides):
		start, end = self.arrowheads(node)
		if start is not None or end is not None:
			return self.factory.arrow(points, start, end, close=close, **self.paint(node, **overrides))
		else:
			return self.factory.line(points, close=close, **self.paint(node, **overrides))
	
	def synthesize_rect(self, node):
		x = self.number_attribute(node, 'x')
		y = self.number_attribute(node, 'y')
		width = self.number_attribute(node, 'width')
		height = self.number_attribute(node, 'height')
		if width <= 0 or height <= 0:
			return []
		
		corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
		box = bounding_box(transform_points(corners, accumulated_transform(node)))
		rounded = node.has_attribute('rx') or node.has_attribute('ry')
		return [self.factory.rectangle(box, rounded=rounded, **self.paint(node))]
	
	def __ellipse(self, node, rx, ry):
		if rx <= 0 or ry <= 0:
			return []
		
		cx = self.number_attribute(node, 'cx')
		cy = self.number_attribute(node, 'cy')
		extremes = [(cx - rx, cy), (cx + rx, cy), (cx, cy - ry), (cx, cy + ry)]
		box = bounding_box(transform_points(extremes, accumulated_transform(node)))
		return [self.factory.ellipse(box, **self.paint(node))]
	
	def synthesize_circle(self, node):
		r = self.number_attribute(node, 'r')
		return self.__ellipse(node, r, r)
	
	def synthesize_ellipse(self, node):
		return self.__ellipse(node, self.number_attribute(node, 'rx'), self.number_attribute(node, 'ry'))
	
	def synthesize_polygon(self, node):
		points = parse_points(node.get_attribute('points'))
		if len(points) < 2:
			return []
		return [self.line_or_arrow(node, transform_points(points, accumulated_transform(node)), close=True)]
	
	def synthesize_polyline(self, node):
		points = parse_points(node.get_attribute('points'))
		if len(points) < 2:
			return []
		return [self.line_or_arrow(node, transform_points(points, accumulated_transform(node)))]
	
	def synthesize_line(self, node):
		points = [(self.number_attribute(node, 'x1'), self.number_attribute(node, 'y1')), (self.number_attribute(node, 'x2'), self.number_attribute(node, 'y2'))]
		return [self.line_or_arrow(node, transform_points(points, accumulated_transform(node)), background_color=TRANSPARENT)]
	
	def fill_rule(self, node):
		rule = (self.style.resolve(node, 'fill-rule') or '').strip().lower()
		return rule if rule in ('nonzero', 'evenodd') else 'nonzero'
	
	def synthesize_path(self, node):
		fill_rule = self.fill_rule(node)
		subpaths = decompose_path(node.get_attribute('d'), accumulated_transform(node), fill_rule)
		if not subpaths:
			return []
		
		group_ids = [self.factory.generate_group_id()] if len(subpaths) > 1 else []
		fill = self.style.resolve_fill(node)
		stroke = self.style.resolve_stroke(node)
		stroke_width = self.stroke_width(node)
		visible_fill = fill != TRANSPARENT
		visible_stroke = stroke != TRANSPARENT and stroke_width > 0
		start, end = self.arrowheads(node)
		
		elements = []
		initial_winding = None
		for subpath in subpaths:
			points = subpath.points
			
			if not subpath.is_closed:
				if not visible_stroke:
					continue
				if start is not None or end is not None:
					elements.append(self.factory.arrow(points, start, end, stroke_color=stroke, stroke_width=stroke_width, group_ids=group_ids))
				else:
					elements.append(self.factory.line(points, stroke_color=stroke, background_color=TRANSPARENT, stroke_width=stroke_width, group_ids=group_ids))
			
			elif not visible_fill:
				if not visible_stroke:
					continue
				elements.append(self.factory.line(points, close=True, stroke_color=stroke, background_color=TRANSPARENT, stroke_width=stroke_width, group_ids=group_ids))
			
			else:
				background = fill
				if fill_rule == 'nonzero':
					if initial_winding is None:
						initial_winding = subpath.winding
					elif subpath.winding != initial_winding or subpath.is_hole:
						background = TRANSPARENT
				elif subpath.is_hole:
					background = TRANSPARENT
				
				draw = self.factory.draw(points, stroke_color=stroke, background_color=background, stroke_width=(stroke_width if visible_stroke else 0), group_ids=group_ids)
				if draw is not None:
					elements.append(draw)
		
		return elements
	
	def text_content(self, node):
		tspans = list(node.find_descendants('tspan'))
		if not tspans:
			return node.text_content().strip()
		lines = [_tspan.text_content().strip() for _tspan in tspans]
		return '\n'.join(_line for _line in lines if _line)
	
	def text_anchor(self, node):
		x = self.number_attribute(node, 'x', None)
		y = self.number_attribute(node, 'y', None)
		if x is not None and y is not None:
			return x, y
		
		tspan = next(node.find_descendants('tspan'), None)
		if tspan is not None:
			x = self.number_attribute(tspan, 'x', None)
			y = self.number_attribute(tspan, 'y', None)
			if x is not None and y is not None:
				return x, y
		
		return 0, 0
	
	def synthesize_text(self, node):
		text = self.text_content(node)
		if not text:
			return []
		
		font_size = max(1, self.style.resolve_number(node, 'font-size', DEFAULT_FONT_SIZE))
		tx, ty = transform_point(self.text_anchor(node), accumulated_transform(node))
		
		lines = text.split('\n')
		width = max(1, max(len(_line) for _line in lines) * font_size * CHARACTER_WIDTH)
		height = max(1, len(lines) * font_size * LINE_HEIGHT)
		
		text_align = {'middle': 'center', 'end': 'right'}.get(self.style.resolve(node, 'text-anchor'), 'left')
		vertical_align = 'middle' if self.style.resolve(node, 'dominant-baseline') in ('middle', 'central') else 'top'
		
		if text_align == 'center':
			x = tx - width / 2
		elif text_align == 'right':
			x = tx - width
		else:
			x = tx
		
		if vertical_align == 'middle':
			y = ty - height / 2
		else:
			y = ty - font_size * ASCENT
		
		return [self.factory.text(x, y, width, height, text, font_size, text_align, vertical_align, color=self.style.resolve_fill(node))]
	
	synthesizers = {
		'rect': synthesize_rect,
		'circle': synthesize_circle,
		'ellipse': synthesize_ellipse,
		'line': synthesize_line,
		'polygon': synthesize_polygon,
		'polyline': synthesize_polyline,
		'path': synthesize_path,
		'text': synthesize_text
	}


if __debug__ and __name__ == '__main__':
	from random import Random
	from svgtoexc.format.xml import XMLFormat
	from svgtoexc.convert.style import StyleContext
	from svgtoexc.convert.elements import ElementFactory
	
	print("shapes")
	
	assert parse_points('0,0 10,0 10 10 5') == [(0, 0), (10, 0), (10, 10)]
	
	root = XMLFormat().xml_fromstring('''<svg xmlns="http://www.w3.org/2000/svg">
		<rect id="r" x="10" y="12" width="30" height="20" rx="2"/>
		<g transform="translate(5 5)"><circle id="c" cx="0" cy="0" r="5"/></g>
		<line id="l" x1="0" y1="0" x2="10" y2="0" stroke="#000" marker-end="url(#arrow)"/>
		<path id="p" d="M0 0 H100 V100 H0 Z M25 25 V75 H75 V25 Z" fill="#333333"/>
		<text id="t" x="0" y="0" text-anchor="middle">Hello</text>
	</svg>''')
	synthesizer = ShapeSynthesizer(StyleContext(root), ElementFactory(Random(0)))
	
	rect, = synthesizer.synthesize(root.find_by_id('r'))
	assert (rect['x'], rect['y'], rect['width'], rect['height']) == (10, 12, 30, 20)
	assert rect['strokeSharpness'] == 'round'
	
	circle, = synthesizer.synthesize(root.find_by_id('c'))
	assert (circle['x'], circle['y'], circle['width']) == (0, 0, 10)
	
	arrow, = synthesizer.synthesize(root.find_by_id('l'))
	assert arrow['type'] == 'arrow' and arrow['endArrowhead'] == 'arrow' and arrow['startArrowhead'] is None
	
	outer, inner = synthesizer.synthesize(root.find_by_id('p'))
	assert outer['groupIds'] == inner['groupIds'] and len(outer['groupIds']) == 1
	assert outer['backgroundColor'] == '#333333' and inner['backgroundColor'] == TRANSPARENT
	assert outer['strokeWidth'] == 0
	
	text, = synthesizer.synthesize(root.find_by_id('t'))
	assert text['x'] == -text['width'] / 2 and text['textAlign'] == 'center'
