#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'InputError', 'InputDetection', 'ResolvedInput', 'is_svg_markup', 'normalize_dropped_path', 'detect_input_mode', 'resolve_svg_input'


import re
import os.path
from collections import namedtuple
from urllib.parse import unquote
from logging import getLogger


logger = getLogger(__name__)


SVG_MARKUP = 'svg-markup'
FILE_PATH = 'file-path'
UNKNOWN = 'unknown'


class InputError(ValueError):
	pass


InputDetection = namedtuple('InputDetection', 'mode normalized_path', defaults=(None,))
ResolvedInput = namedtuple('ResolvedInput', 'mode svg normalized_path', defaults=(None,))


_re_svg = re.compile(r'<svg[\s>]', re.IGNORECASE)
_re_escaped = re.compile(r'''\\([()'"\\])''')
_re_drive = re.compile(r'^[A-Za-z]:\\')


def is_svg_markup(text):
	return _re_svg.search(text) is not None


def normalize_dropped_path(text):
	"Clean up a path pasted or dropped into a terminal: quotes, `file://` URL, shell escapes, home directory."
	
	path = text.strip()
	if not path:
		return path
	
	if len(path) >= 2 and path[0] == path[-1] and path[0] in '"\'':
		path = path[1:-1]
	
	if path.startswith('file://'):
		path = unquote(path[len('file://'):])
	
	path = path.replace('\\ ', ' ')
	path = _re_escaped.sub(r'\1', path)
	
	if path.startswith('~/'):
		path = os.path.join(os.path.expanduser('~'), path[2:])
	
	return os.path.normpath(path)


def looks_like_file_path(path):
	if not path or '\n' in path:
		return False
	return path.startswith(('/', '~/', './', '../')) or path.lower().endswith('.svg') or _re_drive.match(path) is not None


def detect_input_mode(text):
	text = text.strip()
	if not text:
		return InputDetection(UNKNOWN)
	
	if is_svg_markup(text):
		return InputDetection(SVG_MARKUP)
	
	path = normalize_dropped_path(text)
	if looks_like_file_path(path):
		return InputDetection(FILE_PATH, path)
	
	return InputDetection(UNKNOWN)


def resolve_svg_input(text):
	"Markup itself, or the contents of the SVG file the text points to. Raises `InputError`."
	
	text = text.strip()
	if not text:
		raise InputError("No input detected. Paste SVG markup or drop an SVG file path.")
	
	if is_svg_markup(text):
		return ResolvedInput(SVG_MARKUP, text)
	
	path = normalize_dropped_path(text)
	if not looks_like_file_path(path):
		raise InputError("Input is neither SVG markup nor a valid-looking file path. Paste <svg ...> or drop a .svg file.")
	
	if not os.path.exists(path):
		raise InputError(f"SVG file not found: {path}")
	if not os.path.isfile(path):
		raise InputError(f"Path is not a file: {path}")
	
	logger.debug(f"Reading SVG from {path}")
	with open(path, encoding='utf-8') as fd:
		svg = fd.read()
	
	if not is_svg_markup(svg):
		raise InputError(f"File does not look like SVG markup: {path}")
	
	return ResolvedInput(FILE_PATH, svg, path)


if __debug__ and __name__ == '__main__':
	print("input")
	
	assert is_svg_markup('<SVG width="1">')
	assert not is_svg_markup('<svgfoo>')
	assert normalize_dropped_path("'/tmp/my\\ file.svg'") == '/tmp/my file.svg'
	assert normalize_dropped_path('file:///tmp/a%20b.svg') == '/tmp/a b.svg'
	assert detect_input_mode('<svg></svg>').mode == SVG_MARKUP
	assert detect_input_mode('drawing.svg') == InputDetection(FILE_PATH, 'drawing.svg')
	assert detect_input_mode('hello').mode == UNKNOWN
