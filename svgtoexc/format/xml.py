#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'XMLFormat', 'SVGElement', 'local_name'


if __name__ == '__main__':
	import sys
	del sys.path[0] # needs to be removed because this module is called "xml"


from lxml.etree import ElementBase, fromstring, XMLParser, ElementDefaultClassLookup


def local_name(tag):
	"Lower-cased tag name without the namespace. Comments and processing instructions give an empty string."
	if not isinstance(tag, str):
		return ''
	return tag.rsplit('}', 1)[-1].lower()


class SVGElement(ElementBase):
	"Element of a parsed SVG tree. The parent is reached through `getparent()`, which lxml keeps as a non-owning reference."
	
	@property
	def name(self):
		return local_name(self.tag)
	
	def get_attribute(self, attr, default=None):
		"Attribute lookup: exact name first, then case-insensitive on the local name."
		
		try:
			return self.attrib[attr]
		except KeyError:
			pass
		
		attr = attr.lower()
		for key, value in self.attrib.items():
			if local_name(key) == attr:
				return value
		return default
	
	def has_attribute(self, attr):
		return self.get_attribute(attr) is not None
	
	def text_content(self):
		return ''.join(self.itertext())
	
	def find_descendants(self, *names):
		"Descendants (not including self) whose local name is one of `names`, in document order."
		names = frozenset(_name.lower() for _name in names)
		for node in self.iterdescendants():
			if local_name(node.tag) in names:
				yield node
	
	def find_by_id(self, ident):
		for node in self.iter():
			if isinstance(node.tag, str) and node.get('id') == ident:
				return node
		return None
	
	def ancestors(self):
		parent = self.getparent()
		while parent is not None:
			yield parent
			parent = parent.getparent()


class XMLFormat:
	def __init__(self, *args, SVGElement=SVGElement, **kwargs):
		self.SVGElement = SVGElement
		
		self.xml_parser = XMLParser(remove_comments=True, remove_pis=True, resolve_entities=False, no_network=True)
		self.xml_parser.set_element_class_lookup(ElementDefaultClassLookup(element=SVGElement))
	
	def xml_fromstring(self, data):
		"Parse markup into an element tree. Raises `lxml.etree.XMLSyntaxError` on malformed input."
		if isinstance(data, str):
			data = data.encode('utf-8')
		return fromstring(data, self.xml_parser)
	
	def find_svg_root(self, element):
		"The document element if it is <svg>, otherwise the first <svg> descendant."
		if local_name(element.tag) == 'svg':
			return element
		for node in element.iterdescendants():
			if local_name(node.tag) == 'svg':
				return node
		return None


if __debug__ and __name__ == '__main__':
	print("xml format")
	
	model = XMLFormat()
	a = model.xml_fromstring('''<?xml version="1.0" encoding="UTF-8"?>
<!-- comment -->
<html>
 <svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 10 10">
  <defs><clipPath id="c"><rect Width="3"/></clipPath></defs>
  <text x="1">a<tspan>b</tspan></text>
 </svg>
</html>
''')
	svg = model.find_svg_root(a)
	assert svg.name == 'svg' and a.name == 'html'
	assert svg.get_attribute('viewbox') == '0 0 10 10'
	rect, = svg.find_descendants('rect')
	assert rect.get_attribute('width') == '3'
	assert [_a.name for _a in rect.ancestors()] == ['clippath', 'defs', 'svg', 'html']
	assert svg.find_by_id('c').name == 'clippath'
	text, = svg.find_descendants('text')
	assert text.text_content() == 'ab'
