#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'main',


import sys
from argparse import ArgumentParser
from os import environ
from logging import getLogger, basicConfig, DEBUG

from svgtoexc.convert.scene import SVGConverter, ConversionError
from svgtoexc.format.json import JSONFormat
from svgtoexc.io.input import resolve_svg_input, InputError
from svgtoexc.io.clipboard import copy_to_clipboard, ClipboardError


logger = getLogger('svgtoexc')


def argument_parser():
	parser = ArgumentParser(prog='svgtoexc', description="Convert SVG markup or an SVG file into an Excalidraw clipboard document.")
	parser.add_argument('input', nargs='?', default='-', help="SVG markup, path to an SVG file, or - for standard input (default)")
	parser.add_argument('-o', '--output', help="write the document to this file instead of standard output")
	parser.add_argument('--copy', action='store_true', help="copy the document to the clipboard")
	parser.add_argument('--indent', type=int, default=2, help="JSON indentation (default 2)")
	parser.add_argument('--debug', action='store_true', help="verbose logging")
	return parser


def main(argv=None):
	args = argument_parser().parse_args(argv)
	
	basicConfig(level=(DEBUG if args.debug else environ.get('SVGTOEXC_LOG_LEVEL', 'WARNING').upper()), format='%(levelname)s %(name)s: %(message)s')
	
	try:
		text = sys.stdin.read() if args.input == '-' else args.input
		resolved = resolve_svg_input(text)
		if resolved.normalized_path:
			logger.info(f"Converting {resolved.normalized_path}")
		
		document = SVGConverter().convert(resolved.svg)
		output = JSONFormat().dump_document(document, args.indent)
		
		if args.copy:
			copy_to_clipboard(output)
			logger.info(f"Copied {len(document.elements)} elements to the clipboard.")
		
		if args.output:
			with open(args.output, 'w', encoding='utf-8') as fd:
				fd.write(output)
				fd.write('\n')
		else:
			print(output)
	
	except (InputError, ConversionError, ClipboardError, OSError) as error:
		print(f"error: {error}", file=sys.stderr)
		return 1
	
	return 0


if __name__ == '__main__':
	sys.exit(main())
