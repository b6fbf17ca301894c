#!/usr/bin/python3


__all__ = 'convert_svg', 'SVGConverter', 'ConversionError', 'SVGParseError', 'MissingRootError', \
          'ElementFactory', 'Element', 'ElementType', 'Document', 'StyleContext', 'JSONFormat', \
          'resolve_svg_input', 'detect_input_mode', 'InputError', 'copy_to_clipboard', 'ClipboardError'


if __name__ == '__main__':
	print("SVG to scene converter")

else:
	def __dir__():
		return __all__
	
	def __getattr__(symbol):
		if symbol in ('convert_svg', 'SVGConverter', 'ConversionError', 'SVGParseError', 'MissingRootError'):
			from .convert import scene
			return getattr(scene, symbol)
		
		elif symbol in ('ElementFactory', 'Element', 'ElementType', 'Document'):
			from .convert import elements
			return getattr(elements, symbol)
		
		elif symbol == 'StyleContext':
			from .convert.style import StyleContext
			return StyleContext
		
		elif symbol == 'JSONFormat':
			from .format.json import JSONFormat
			return JSONFormat
		
		elif symbol in ('resolve_svg_input', 'detect_input_mode', 'InputError'):
			from .io import input
			return getattr(input, symbol)
		
		elif symbol in ('copy_to_clipboard', 'ClipboardError'):
			from .io import clipboard
			return getattr(clipboard, symbol)
		
		else:
			raise AttributeError(f"module {__name__!r} has no attribute {symbol!r}")
