#!/usr/bin/python3
#-*- coding:utf-8 -*-


import io
from json import loads

from svgtoexc.__main__ import main
import svgtoexc.__main__ as cli


markup = '<svg xmlns="http://www.w3.org/2000/svg"><rect x="1" y="2" width="3" height="4"/></svg>'


def test_markup_argument(capsys):
	assert main([markup]) == 0
	document = loads(capsys.readouterr().out)
	assert document['type'] == 'excalidraw'
	assert [_e['type'] for _e in document['elements']] == ['rectangle']


def test_standard_input(monkeypatch, capsys):
	monkeypatch.setattr('sys.stdin', io.StringIO(markup))
	assert main([]) == 0
	assert len(loads(capsys.readouterr().out)['elements']) == 1


def test_file_in_file_out(tmp_path):
	source = tmp_path / 'in.svg'
	source.write_text(markup, encoding='utf-8')
	target = tmp_path / 'out.json'
	assert main([str(source), '-o', str(target), '--indent', '0']) == 0
	assert loads(target.read_text(encoding='utf-8'))['elements'][0]['width'] == 3


def test_copy(monkeypatch, capsys):
	copied = []
	monkeypatch.setattr(cli, 'copy_to_clipboard', copied.append)
	assert main([markup, '--copy']) == 0
	assert loads(copied[0])['elements'][0]['type'] == 'rectangle'


def test_errors(capsys):
	assert main(['<svg><rect></svg>']) == 1
	assert capsys.readouterr().err.startswith('error: SVG parsing error:')
	
	assert main(['hello']) == 1
	assert 'neither SVG markup' in capsys.readouterr().err
	
	assert main(['<html><svg-like/></html>']) == 1
