"""
# TZif parsing with synthesized files.
"""
from .. import tzif
from .. import zone
from .. import errors
from . import mock

def test_parse_version_2(test):
	tz = tzif.parse(mock.central_europe_tzif(b'2'))
	test/tz.version == 2
	test/tz.transitions == ((mock.spring, 1), (mock.autumn, 0))
	test/tz.footer == 'CET-1CEST,M3.5.0,M10.5.0/3'
	test/tz.leaps == ()

	cet, cest = tz.types
	test/cet.offset == 3600
	test/cet.isdst == False
	test/cet.abbreviation == 'CET'
	test/cest.offset == 7200
	test/cest.isdst == True
	test/cest.abbreviation == 'CEST'

def test_parse_version_1(test):
	tz = tzif.parse(mock.central_europe_tzif(b'\0'))
	test/tz.version == 1
	test/tz.footer == None
	test/tz.transitions == ((mock.spring, 1), (mock.autumn, 0))

def test_parse_version_2_prefers_64bit(test):
	# The 32-bit block is empty; only the 64-bit block carries the transitions.
	types = [(3600, 0, 0), (7200, 1, 4)]
	data = mock.block(b'3', '!l', [], [(0, 0, 0)], b'UTC\0')
	data += mock.block(b'3', '!q', [(-(2**40), 0), (mock.spring, 1)], types, b'CET\0CEST\0')
	data += b'\n\n'
	tz = tzif.parse(data)
	test/tz.version == 3
	test/tz.transitions == ((-(2**40), 0), (mock.spring, 1))
	test/tz.footer == None

def test_rules_from_data(test):
	rules = tzif.rules_from_data(mock.central_europe_tzif(), name='Test/Central')
	test/rules.name == 'Test/Central'
	test/rules.initial == mock.cet
	test/len(rules.transitions) == 2
	test/rules.transitions[0].is_gap == True
	test/rules.transitions[1].is_overlap == True
	test/rules.transitions[0].after == zone.Offset.of(hours=2)

def test_redundant_transitions(test):
	data = mock.tzif(
		b'2',
		[(0, 0), (mock.spring, 1), (mock.autumn, 2)],
		[(3600, 0, 0), (7200, 1, 4), (3600, 0, 0)],
		b'CET\0CEST\0',
	)
	rules = tzif.rules_from_data(data)
	test/len(rules.transitions) == 2
	test/rules.transitions[1].after == mock.cet

def test_invalid_data(test):
	test/errors.RulesError ^ (lambda: tzif.parse(b'not a tzif file, but long enough to have a header'))
	test/errors.RulesError ^ (lambda: tzif.parse(b'TZif2'))
	test/errors.RulesError ^ (lambda: tzif.parse(mock.central_europe_tzif()[:60]))

	# Transition referring to a missing type.
	data = mock.tzif(b'\0', [(0, 3)], [(3600, 0, 0)], b'CET\0')
	test/errors.RulesError ^ (lambda: tzif.parse(data))

	data = mock.tzif(b'\0', [], [], b'')
	test/errors.RulesError ^ (lambda: tzif.rules_from_data(data))

def test_system_timezone_file(test):
	test/tzif.system_timezone_file('Europe/Paris', '/zones') == '/zones/Europe/Paris'
	test/errors.RulesError ^ (lambda: tzif.system_timezone_file('../../etc/shadow', '/zones'))

def test_identify(test):
	test/tzif.identify('/nonexistent/zoneinfo/Test/Central') == 'Test/Central'
	test/tzif.identify('/nonexistent/localtime') == 'localtime'

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
