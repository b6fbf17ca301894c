#!/usr/bin/python3
#-*- coding:utf-8 -*-


from random import Random

import pytest

from svgtoexc.format.xml import XMLFormat
from svgtoexc.convert.elements import ElementFactory
from svgtoexc.convert.scene import convert_svg


@pytest.fixture
def factory():
	return ElementFactory(Random(1234))


@pytest.fixture
def convert(factory):
	def convert(markup):
		return convert_svg(markup, factory).elements
	return convert


@pytest.fixture
def parse():
	model = XMLFormat()
	def parse(markup):
		return model.find_svg_root(model.xml_fromstring(markup))
	return parse
