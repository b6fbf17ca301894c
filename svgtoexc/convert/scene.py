#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'SVGConverter', 'convert_svg', 'ConversionError', 'SVGParseError', 'MissingRootError', 'SUPPORTED_TAGS', 'NON_RENDERED_TAGS'


from logging import getLogger
from lxml.etree import XMLSyntaxError

if __name__ == '__main__':
	from svgtoexc.format.xml import XMLFormat, local_name
	from svgtoexc.convert.style import StyleContext, parse_number
	from svgtoexc.convert.elements import ElementFactory, Document
	from svgtoexc.convert.shapes import ShapeSynthesizer
else:
	from ..format.xml import XMLFormat, local_name
	from .style import StyleContext, parse_number
	from .elements import ElementFactory, Document
	from .shapes import ShapeSynthesizer


logger = getLogger(__name__)


SUPPORTED_TAGS = 'rect', 'circle', 'ellipse', 'line', 'polygon', 'polyline', 'path', 'text'
NON_RENDERED_TAGS = frozenset({'defs', 'symbol', 'clippath', 'mask', 'marker', 'pattern', 'lineargradient', 'radialgradient', 'filter'})


class ConversionError(Exception):
	pass


class SVGParseError(ConversionError):
	def __init__(self, detail):
		super().__init__(f"SVG parsing error: {detail}")
		self.detail = detail


class MissingRootError(ConversionError):
	def __init__(self):
		super().__init__("Input does not contain a valid <svg> root element.")


class SVGConverter(XMLFormat):
	"Converts SVG markup into a scene `Document`. One instance can be reused for many conversions."
	
	def __init__(self, *args, factory=None, **kwargs):
		super().__init__(*args, **kwargs)
		self.factory = factory if factory is not None else ElementFactory()
	
	def parse_svg(self, markup):
		if not markup or not markup.strip():
			raise SVGParseError("Document is empty.")
		
		try:
			document = self.xml_fromstring(markup)
		except XMLSyntaxError as error:
			raise SVGParseError(str(error).strip() or "Malformed SVG input.") from error
		
		svg_root = self.find_svg_root(document)
		if svg_root is None:
			raise MissingRootError()
		return svg_root
	
	@staticmethod
	def in_non_rendered_container(node):
		return any(local_name(_ancestor.tag) in NON_RENDERED_TAGS for _ancestor in node.ancestors())
	
	@staticmethod
	def is_hidden(node, style):
		"True when the node or any ancestor has `display: none`, `visibility: hidden` or zero opacity."
		
		current = node
		while current is not None:
			for prop, hidden in (('display', 'none'), ('visibility', 'hidden')):
				for step in style.cascade[:3]:
					value = step(current, prop)
					if value is not None and value.strip().lower() == hidden:
						return True
			
			opacity = parse_number(style.local_value(current, 'opacity'), None)
			if opacity is not None and opacity <= 0:
				return True
			
			current = current.getparent()
		
		return False
	
	def renderable_nodes(self, svg_root, style):
		for node in svg_root.find_descendants(*SUPPORTED_TAGS):
			if self.in_non_rendered_container(node):
				continue
			if self.is_hidden(node, style):
				logger.debug(f"Skipping hidden <{node.name}> {node.get_attribute('id') or ''}")
				continue
			yield node
	
	def convert(self, markup):
		"Convert SVG markup to a `Document`. Raises `SVGParseError` or `MissingRootError`."
		
		svg_root = self.parse_svg(markup)
		style = StyleContext(svg_root)
		synthesizer = ShapeSynthesizer(style, self.factory)
		
		elements = []
		count = 0
		for node in self.renderable_nodes(svg_root, style):
			count += 1
			elements.extend(synthesizer.synthesize(node))
		
		logger.info(f"Converted {count} SVG nodes into {len(elements)} elements.")
		return Document(elements)


def convert_svg(markup, factory=None):
	"Convert SVG markup to a scene `Document`."
	return SVGConverter(factory=factory).convert(markup)


if __debug__ and __name__ == '__main__':
	from random import Random
	
	print("scene")
	
	document = convert_svg('''<svg xmlns="http://www.w3.org/2000/svg">
		<defs><rect width="10" height="10"/></defs>
		<clipPath id="c"><circle r="4"/></clipPath>
		<rect x="10" y="12" width="30" height="20"/>
		<g style="display: none"><rect width="5" height="5"/></g>
		<rect width="5" height="5" opacity="0"/>
		<foreignObject width="5" height="5"/>
	</svg>''', ElementFactory(Random(3)))
	assert len(document.elements) == 1
	assert document.elements[0]['type'] == 'rectangle'
	
	for bad, error in [('<svg', SVGParseError), ('<html><body/></html>', MissingRootError)]:
		try:
			convert_svg(bad)
		except error:
			pass
		else:
			raise AssertionError(bad)
