#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'JSONFormat',


if __name__ == '__main__':
	import sys
	del sys.path[0] # needs to be removed because this module is called "json"


from io import BytesIO
from json import loads, dumps

if __name__ == '__main__':
	from svgtoexc.convert.elements import Document, Element, DOCUMENT_TYPE
else:
	from ..convert.elements import Document, Element, DOCUMENT_TYPE


class JSONFormat:
	"Serialization of scene documents to the clipboard JSON text and back."
	
	def __init__(self, *args, **kwargs):
		pass
	
	def create_document(self, data:bytes):
		content = loads(data.decode('utf-8') if isinstance(data, bytes) else data)
		if not isinstance(content, dict) or content.get('type') != DOCUMENT_TYPE:
			raise ValueError(f"Not a {DOCUMENT_TYPE} document.")
		return Document(Element(_element) for _element in content.get('elements', []))
	
	def dump_document(self, document, indent=2):
		return dumps(document.to_json(), indent=indent, ensure_ascii=False)
	
	def save_document(self, document, fileobj=None, indent=2):
		if not self.is_scene_document(document):
			return NotImplemented
		if fileobj == None:
			fileobj = BytesIO()
		fileobj.write(self.dump_document(document, indent).encode('utf-8'))
		return fileobj
	
	def is_scene_document(self, document):
		return isinstance(document, Document)


if __name__ == '__main__':
	from random import Random
	from svgtoexc.convert.elements import ElementFactory
	
	print("json format")
	
	model = JSONFormat()
	factory = ElementFactory(Random(5))
	document = Document([factory.line([(0, 0), (3, 4)])])
	text = model.save_document(document).getvalue()
	assert text.startswith(b'{\n  "type": "excalidraw"')
	again = model.create_document(text)
	assert model.is_scene_document(again)
	assert again.elements[0]['points'] == [[0, 0], [3, 4]]
	assert model.save_document(object()) is NotImplemented
