#!/usr/bin/python3
#-*- coding:utf-8 -*-


import os.path

import pytest

from svgtoexc.io.input import InputError, InputDetection, is_svg_markup, normalize_dropped_path, detect_input_mode, resolve_svg_input
from svgtoexc.io.clipboard import ClipboardError, clipboard_command, copy_to_clipboard
from svgtoexc.io import clipboard


markup = '<svg xmlns="http://www.w3.org/2000/svg"><rect width="1" height="1"/></svg>'


@pytest.mark.parametrize('text, expected', [
	('<svg>', True),
	('  <?xml version="1.0"?>\n<SVG\nwidth="1">', True),
	('<svgx>', False),
	('svg', False),
])
def test_is_svg_markup(text, expected):
	assert is_svg_markup(text) == expected


@pytest.mark.parametrize('text, expected', [
	('  /tmp/drawing.svg  ', '/tmp/drawing.svg'),
	('"/tmp/my drawing.svg"', '/tmp/my drawing.svg'),
	("'/tmp/a.svg'", '/tmp/a.svg'),
	('/tmp/my\\ drawing\\ \\(1\\).svg', '/tmp/my drawing (1).svg'),
	('file:///tmp/a%20b.svg', '/tmp/a b.svg'),
	('/tmp/x/../a.svg', '/tmp/a.svg'),
	('', ''),
])
def test_normalize_dropped_path(text, expected):
	assert normalize_dropped_path(text) == expected


def test_normalize_home_directory():
	assert normalize_dropped_path('~/a.svg') == os.path.join(os.path.expanduser('~'), 'a.svg')


@pytest.mark.parametrize('text, mode', [
	(markup, 'svg-markup'),
	('/tmp/a.svg', 'file-path'),
	('../drawing', 'file-path'),
	('drawing.SVG', 'file-path'),
	('C:\\drawings\\a.svg', 'file-path'),
	('hello world', 'unknown'),
	('', 'unknown'),
	('a\nb.svg', 'unknown'),
])
def test_detect_input_mode(text, mode):
	assert detect_input_mode(text).mode == mode


def test_detect_file_path_carries_normalized_path():
	assert detect_input_mode("'/tmp/x.svg'") == InputDetection('file-path', '/tmp/x.svg')
	assert detect_input_mode(markup).normalized_path is None


def test_resolve_markup():
	resolved = resolve_svg_input('  ' + markup + '\n')
	assert resolved.mode == 'svg-markup'
	assert resolved.svg == markup
	assert resolved.normalized_path is None


def test_resolve_file(tmp_path):
	path = tmp_path / 'my drawing.svg'
	path.write_text(markup, encoding='utf-8')
	resolved = resolve_svg_input(str(path).replace(' ', '\\ '))
	assert resolved.mode == 'file-path'
	assert resolved.svg == markup
	assert resolved.normalized_path == str(path)


def test_resolve_errors(tmp_path):
	with pytest.raises(InputError, match='No input'):
		resolve_svg_input('   ')
	
	with pytest.raises(InputError, match='neither SVG markup'):
		resolve_svg_input('hello')
	
	with pytest.raises(InputError, match='not found'):
		resolve_svg_input(str(tmp_path / 'missing.svg'))
	
	with pytest.raises(InputError, match='not a file'):
		resolve_svg_input(str(tmp_path))
	
	text = tmp_path / 'notes.svg'
	text.write_text('just text', encoding='utf-8')
	with pytest.raises(InputError, match='does not look like SVG'):
		resolve_svg_input(str(text))


def test_clipboard_command(monkeypatch):
	monkeypatch.setattr(clipboard.shutil, 'which', lambda _name: '/usr/bin/' + _name if _name in ('pbcopy', 'xsel') else None)
	assert clipboard_command('darwin') == ('pbcopy',)
	assert clipboard_command('linux') == ('xsel', '--clipboard', '--input')
	
	monkeypatch.setattr(clipboard.shutil, 'which', lambda _name: None)
	assert clipboard_command('linux') is None


def test_copy_without_tool(monkeypatch):
	monkeypatch.setattr(clipboard, 'clipboard_command', lambda: None)
	with pytest.raises(ClipboardError):
		copy_to_clipboard('{}')


def test_copy_failure(monkeypatch):
	class Result:
		returncode = 1
		stderr = b'cannot open display\n'
	
	monkeypatch.setattr(clipboard, 'clipboard_command', lambda: ('xclip',))
	monkeypatch.setattr(clipboard.subprocess, 'run', lambda *args, **kwargs: Result())
	with pytest.raises(ClipboardError, match='xclip failed: cannot open display'):
		copy_to_clipboard('{}')


def test_copy_success(monkeypatch):
	calls = []
	
	class Result:
		returncode = 0
		stderr = b''
	
	def run(command, input, **kwargs):
		calls.append((command, input))
		return Result()
	
	monkeypatch.setattr(clipboard, 'clipboard_command', lambda: ('wl-copy',))
	monkeypatch.setattr(clipboard.subprocess, 'run', run)
	copy_to_clipboard('{"a": 1}')
	assert calls == [(('wl-copy',), b'{"a": 1}')]
