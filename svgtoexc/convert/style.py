#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'StyleContext', 'parse_number', 'TRANSPARENT', 'DEFAULT_FILL', 'DEFAULT_STROKE'


import re
from logging import getLogger

if __name__ == '__main__':
	from svgtoexc.format.css import CSSFormat
	from svgtoexc.format.xml import local_name
else:
	from ..format.css import CSSFormat
	from ..format.xml import local_name


logger = getLogger(__name__)


TRANSPARENT = 'transparent'
DEFAULT_FILL = '#000000'
DEFAULT_STROKE = TRANSPARENT


_re_leading_number = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')
_re_url = re.compile(r'''url\(\s*['"]?#([^'")\s]+)''')


def parse_number(text, default=0):
	"Longest leading floating point number of `text`, or `default` when there is none."
	
	if not text:
		return default
	match = _re_leading_number.match(text)
	if not match:
		return default
	return float(match.group(1))


class StyleContext(CSSFormat):
	"""Presentation value resolution for one SVG tree.
	
	Class rules from all <style> blocks are collected once, on construction. Each lookup then walks
	the cascade: inline `style` of the node, its attribute, its class rules, then inline style and
	attribute of each ancestor up to the root <svg>.
	"""
	
	def __init__(self, svg_root):
		self.svg_root = svg_root
		
		class_rules = {}
		for styletag in svg_root.find_descendants('style'):
			self.parse_class_rules(styletag.text_content(), class_rules)
		self.class_rules = class_rules
		
		self.cascade = (self.inline_value, self.attribute_value, self.class_value, self.inherited_value)
		self.declarations = {}
	
	def inline_declarations(self, style):
		"Parsed `style` attribute text. Identical strings share one dict per context."
		try:
			return self.declarations[style]
		except KeyError:
			declarations = self.declarations[style] = self.parse_declarations(style)
			return declarations
	
	def inline_value(self, node, prop):
		style = node.get_attribute('style')
		if not style:
			return None
		return self.inline_declarations(style).get(prop.lower())
	
	def attribute_value(self, node, prop):
		return node.get_attribute(prop)
	
	def class_value(self, node, prop):
		classes = node.get_attribute('class')
		if not classes:
			return None
		
		prop = prop.lower()
		for classname in classes.split():
			try:
				value = self.class_rules[classname][prop]
			except KeyError:
				continue
			if value:
				return value
		return None
	
	def inherited_value(self, node, prop):
		for ancestor in node.ancestors():
			value = self.inline_value(ancestor, prop) or self.attribute_value(ancestor, prop)
			if value:
				return value
			if local_name(ancestor.tag) == 'svg':
				break
		return None
	
	def local_value(self, node, prop):
		"Value set on the node itself (inline style, attribute or class rule), without inheritance."
		for step in self.cascade[:3]:
			value = step(node, prop)
			if value is not None:
				return value
		return None
	
	def resolve(self, node, prop, default=None):
		for step in self.cascade:
			value = step(node, prop)
			if value is not None:
				return value
		return default
	
	def resolve_number(self, node, prop, default=0):
		return parse_number(self.resolve(node, prop), default)
	
	def resolve_fill(self, node):
		return self.__resolve_color(node, 'fill', DEFAULT_FILL)
	
	def resolve_stroke(self, node):
		return self.__resolve_color(node, 'stroke', DEFAULT_STROKE)
	
	def __resolve_color(self, node, prop, default):
		color = self.resolve(node, prop)
		if not color or color == 'none':
			classcolor = self.class_value(node, prop)
			if classcolor is not None:
				color = classcolor
		return self.normalize_color(color, default)
	
	def normalize_color(self, color, default):
		if not color:
			return default
		
		color = color.strip()
		if not color:
			return default
		elif color == 'none':
			return TRANSPARENT
		elif color.startswith('url('):
			resolved = self.gradient_color(color)
			if resolved is None:
				logger.debug(f"Unresolved paint reference {color}, using {default}.")
				return default
			return resolved
		else:
			return color
	
	def gradient_color(self, url):
		"Color of the first stop of the gradient referenced by `url(#id)`, or None."
		
		match = _re_url.match(url)
		if not match:
			return None
		
		gradient = self.svg_root.find_by_id(match.group(1))
		if gradient is None:
			return None
		
		stop = next(gradient.find_descendants('stop'), None)
		if stop is None:
			return None
		
		return stop.get_attribute('stop-color') or self.inline_value(stop, 'stop-color') or None


if __debug__ and __name__ == '__main__':
	from svgtoexc.format.xml import XMLFormat
	
	print("style")
	
	assert parse_number('10px') == 10
	assert parse_number(' -.5e1') == -5
	assert parse_number('abc', 7) == 7
	assert parse_number(None, 3) == 3
	
	root = XMLFormat().xml_fromstring('''<svg xmlns="http://www.w3.org/2000/svg" fill="#abcdef">
		<style>.k { fill: #123123 } .s { stroke: url(#g) }</style>
		<defs><linearGradient id="g"><stop offset="0" style="stop-color: #ff00ff"/></linearGradient></defs>
		<g style="stroke-width: 3"><rect id="r" class="k s" style="opacity: 0.5"/></g>
	</svg>''')
	context = StyleContext(root)
	rect = root.find_by_id('r')
	assert context.resolve_fill(rect) == '#123123'
	assert context.resolve_stroke(rect) == '#ff00ff'
	assert context.resolve_number(rect, 'stroke-width', 1) == 3
	assert context.resolve(rect, 'opacity') == '0.5'
	assert context.resolve(rect, 'marker-end') is None
	assert context.resolve_fill(root.find_by_id('g')) == '#abcdef'
