#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'ElementType', 'Arrowhead', 'Element', 'Document', 'ElementFactory', 'DOCUMENT_TYPE', 'DOCUMENT_VERSION', 'DOCUMENT_SOURCE'


import string
from random import Random
from enum import Enum
from collections import namedtuple

if __name__ == '__main__':
	from svgtoexc.convert.geometry import dimensions
	from svgtoexc.convert.style import TRANSPARENT
else:
	from .geometry import dimensions
	from .style import TRANSPARENT


DOCUMENT_TYPE = 'excalidraw'
DOCUMENT_VERSION = 2
DOCUMENT_SOURCE = 'https://excalidraw.com'

ID_LENGTH = 26
SEED_LIMIT = 2**31 - 1

FONT_FAMILY = 2
LINE_HEIGHT = 1.25


class ElementType(Enum):
	RECTANGLE = 'rectangle'
	ELLIPSE = 'ellipse'
	LINE = 'line'
	ARROW = 'arrow'
	DRAW = 'draw'
	TEXT = 'text'


class Arrowhead(Enum):
	ARROW = 'arrow'
	BAR = 'bar'
	DOT = 'dot'
	
	@classmethod
	def from_marker(cls, value):
		"Arrowhead kind for a `marker-start` / `marker-end` value, None when there is no marker."
		
		if not value or value == 'none':
			return None
		
		value = value.lower()
		if 'dot' in value or 'circle' in value:
			return cls.DOT
		elif 'bar' in value:
			return cls.BAR
		else:
			return cls.ARROW


class Element(dict):
	"""A scene element. Keys and their order follow the clipboard schema, so the mapping serializes as it is.
	
	The `type` key selects the variant: rectangle and ellipse carry only the base fields,
	line and draw add `points`, arrow adds the points, bindings and arrowheads, text adds the text fields.
	"""
	
	@property
	def kind(self):
		return ElementType(self['type'])
	
	@property
	def points(self):
		return [tuple(_point) for _point in self.get('points', [])]
	
	def __repr__(self):
		return f'<Element {self["type"]} {self["id"]} at ({self["x"]}, {self["y"]}) {self["width"]}x{self["height"]}>'


class Document(namedtuple('Document', 'type version source elements')):
	__slots__ = ()
	
	def __new__(cls, elements):
		return super().__new__(cls, DOCUMENT_TYPE, DOCUMENT_VERSION, DOCUMENT_SOURCE, list(elements))
	
	def to_json(self):
		return {'type': self.type, 'version': self.version, 'source': self.source, 'elements': [dict(_element) for _element in self.elements]}


class ElementFactory:
	"""Creates elements with fresh identity and cosmetic randomness.
	
	Pass a seeded `random.Random` to get reproducible ids, seeds and group ids.
	"""
	
	id_alphabet = string.digits + string.ascii_lowercase
	
	def __init__(self, random=None):
		self.random = random if random is not None else Random()
	
	def generate_id(self):
		return ''.join(self.random.choice(self.id_alphabet) for _n in range(ID_LENGTH))
	
	def generate_seed(self):
		return self.random.randrange(SEED_LIMIT)
	
	def generate_group_id(self):
		return self.generate_id()
	
	def base(self, kind, x=0, y=0, width=0, height=0, stroke_color='#000000', background_color=TRANSPARENT, stroke_width=1, stroke_sharpness='sharp', group_ids=()):
		return Element(
			id=self.generate_id(),
			type=ElementType(kind).value,
			x=x,
			y=y,
			strokeColor=stroke_color,
			backgroundColor=background_color,
			fillStyle='solid',
			strokeWidth=stroke_width,
			strokeStyle='solid',
			strokeSharpness=stroke_sharpness,
			roughness=0,
			opacity=100,
			width=width,
			height=height,
			angle=0,
			seed=self.generate_seed(),
			version=1,
			versionNonce=self.generate_seed(),
			isDeleted=False,
			groupIds=list(group_ids),
			boundElementIds=None
		)
	
	def rectangle(self, box, rounded=False, **style):
		return self.base(ElementType.RECTANGLE, box.min_x, box.min_y, box.width, box.height, stroke_sharpness=('round' if rounded else 'sharp'), **style)
	
	def ellipse(self, box, **style):
		return self.base(ElementType.ELLIPSE, box.min_x, box.min_y, box.width, box.height, **style)
	
	def __polyline(self, kind, points, close, style):
		"Element of the given kind anchored at the first point, with the points stored relative to it."
		
		x, y = points[0]
		relative = [[_x - x, _y - y] for (_x, _y) in points]
		if close:
			relative.append([0, 0])
		width, height = dimensions(relative)
		element = self.base(kind, x, y, width, height, **style)
		element['points'] = relative
		return element
	
	def line(self, points, close=False, **style):
		if not points:
			return None
		return self.__polyline(ElementType.LINE, points, close, style)
	
	def arrow(self, points, start_arrowhead=None, end_arrowhead=None, close=False, **style):
		if not points:
			return None
		style['background_color'] = TRANSPARENT
		element = self.__polyline(ElementType.ARROW, points, close, style)
		element['startBinding'] = None
		element['endBinding'] = None
		element['startArrowhead'] = start_arrowhead.value if start_arrowhead is not None else None
		element['endArrowhead'] = end_arrowhead.value if end_arrowhead is not None else None
		return element
	
	def draw(self, points, **style):
		if len(points) < 2:
			return None
		return self.__polyline(ElementType.DRAW, points, False, style)
	
	def text(self, x, y, width, height, text, font_size, text_align='left', vertical_align='top', color='#000000', group_ids=()):
		element = self.base(ElementType.TEXT, x, y, width, height, stroke_color=color, background_color=TRANSPARENT, stroke_width=0, group_ids=group_ids)
		element['text'] = text
		element['originalText'] = text
		element['fontSize'] = font_size
		element['fontFamily'] = FONT_FAMILY
		element['baseline'] = font_size
		element['textAlign'] = text_align
		element['verticalAlign'] = vertical_align
		element['lineHeight'] = LINE_HEIGHT
		return element


if __debug__ and __name__ == '__main__':
	print("elements")
	
	factory = ElementFactory(Random(7))
	assert len(factory.generate_id()) == ID_LENGTH
	assert 0 <= factory.generate_seed() < SEED_LIMIT
	
	element = factory.line([(10, 10), (20, 15)], stroke_color='#ff0000')
	assert element.kind == ElementType.LINE
	assert element['points'] == [[0, 0], [10, 5]]
	assert (element['width'], element['height']) == (10, 5)
	assert list(element)[:3] == ['id', 'type', 'x']
	
	element = factory.arrow([(0, 0), (5, 0)], end_arrowhead=Arrowhead.from_marker('url(#arrow)'), background_color='#00ff00')
	assert element['endArrowhead'] == 'arrow' and element['startArrowhead'] is None
	assert element['backgroundColor'] == TRANSPARENT
	
	assert Arrowhead.from_marker('url(#Circle)') == Arrowhead.DOT
	assert Arrowhead.from_marker('url(#bar-end)') == Arrowhead.BAR
	assert Arrowhead.from_marker('none') is None
	
	document = Document([element])
	assert document.to_json()['type'] == DOCUMENT_TYPE
	
	assert ElementFactory(Random(1)).generate_id() == ElementFactory(Random(1)).generate_id()
