#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'CSSFormat',


import re
from logging import getLogger
from tinycss2 import parse_stylesheet, parse_rule_list, parse_declaration_list, serialize


logger = getLogger(__name__)


class CSSFormat:
	"Declaration and class-rule parsing of `style` attributes and <style> blocks."
	
	__re_class = re.compile(r'\.([A-Za-z0-9_-]+)')
	
	def parse_declarations(self, text):
		"Parse `prop: value; ...` into a dict. Names are lower-cased, values trimmed; empty ones are dropped, later ones win."
		
		declarations = {}
		if not text:
			return declarations
		
		for decl in parse_declaration_list(text, skip_comments=True, skip_whitespace=True):
			if decl.type != 'declaration':
				continue
			value = serialize(decl.value).strip()
			if decl.lower_name and value:
				declarations[decl.lower_name] = value
		return declarations
	
	def parse_class_rules(self, css_text, class_rules=None):
		"Collect declarations of every rule into each class named in its selector list. Returns `{class: {prop: value}}`."
		
		if class_rules is None:
			class_rules = {}
		if not css_text:
			return class_rules
		
		self.__collect_rules(parse_stylesheet(css_text, skip_comments=True, skip_whitespace=True), class_rules)
		return class_rules
	
	def __collect_rules(self, rules, class_rules):
		for rule in rules:
			if rule.type == 'qualified-rule':
				declarations = self.parse_declarations(serialize(rule.content))
				if not declarations:
					continue
				
				for selector in serialize(rule.prelude).split(','):
					for classname in self.__re_class.findall(selector.strip()):
						class_rules.setdefault(classname, {}).update(declarations)
			
			elif rule.type == 'at-rule':
				if rule.content is not None:
					self.__collect_rules(parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True), class_rules)
			
			elif rule.type == 'error':
				logger.debug(f"CSS parse error: {rule.message}")


if __debug__ and __name__ == '__main__':
	print("css format")
	
	model = CSSFormat()
	assert model.parse_declarations('Fill: #FF0000; stroke:; stroke-width : 2 ') == {'fill': '#FF0000', 'stroke-width': '2'}
	assert model.parse_declarations(None) == {}
	
	rules = model.parse_class_rules('''
		/* comment */
		.a, g.b rect { fill: red; stroke: blue }
		#c { fill: green }
		rect { fill: yellow }
		.a { fill: black }
		@media screen { .d { fill: white } }
	''')
	assert rules == {'a': {'fill': 'black', 'stroke': 'blue'}, 'b': {'fill': 'red', 'stroke': 'blue'}, 'd': {'fill': 'white'}}, rules
