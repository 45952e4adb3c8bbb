"""
# Offsets, transitions and zone rules.
"""
import os
import pickle
import tempfile
from .. import zone
from .. import errors
from .. import tzif
from ..points import Instant, LocalDateTime
from . import mock

def test_offset(test):
	test/str(zone.Offset.of(hours=1)) == '+01:00'
	test/str(zone.Offset.of(-5, -30)) == '-05:30'
	test/str(zone.Offset.from_seconds(1)) == '+00:00:01'
	test/str(zone.UTC) == 'Z'
	test/int(zone.Offset.of(hours=2)) == 7200
	test/zone.Offset.of(hours=1).identifier == '+01:00'
	test/zone.Offset.of(hours=18).seconds == 64800

	test/errors.RangeError ^ (lambda: zone.Offset.of(hours=18, seconds=1))
	test/errors.RangeError ^ (lambda: zone.Offset.of(hours=-19))

def test_offset_order(test):
	test/(mock.cet < mock.cest) == True
	test/(zone.Offset.of(hours=-1) < zone.UTC) == True
	test/sorted([mock.cest, zone.UTC, mock.cet]) == [zone.UTC, mock.cet, mock.cest]
	test/zone.Offset.of(hours=1) == mock.cet

def test_offset_rules(test):
	rules = mock.cet.rules
	test/rules.offset_at(Instant.of(mock.spring)) == mock.cet
	test/rules.valid_offsets(LocalDateTime.of(2019, 3, 31, 2, 30)) == (mock.cet,)
	test/rules.transition_at(LocalDateTime.of(2019, 3, 31, 2, 30)) == None
	test/rules.fixed_offset == True

def test_transition(test):
	gap = zone.Transition((mock.spring, mock.cet, mock.cest))
	test/gap.is_gap == True
	test/gap.is_overlap == False
	test/gap.duration == 3600
	test/gap.valid_offsets == ()
	test/gap.local_before == LocalDateTime.of(2019, 3, 31, 2)
	test/gap.local_after == LocalDateTime.of(2019, 3, 31, 3)
	test/gap.instant == Instant.of(mock.spring)

	overlap = zone.Transition((mock.autumn, mock.cest, mock.cet))
	test/overlap.is_gap == False
	test/overlap.is_overlap == True
	test/overlap.duration == -3600
	test/overlap.valid_offsets == (mock.cest, mock.cet)
	test/overlap.local_before == LocalDateTime.of(2019, 10, 27, 3)
	test/overlap.local_after == LocalDateTime.of(2019, 10, 27, 2)

def test_from_changes(test):
	rules = zone.Rules.from_changes(mock.cet, [
		(mock.autumn, mock.cet),
		(mock.spring - 100, mock.cet),
		(mock.spring, mock.cest),
	])
	test/len(rules.transitions) == 2
	test/rules.transitions[0] == (mock.spring, mock.cet, mock.cest)
	test/rules.transitions[1] == (mock.autumn, mock.cest, mock.cet)

def test_offset_at(test):
	rules = mock.central_europe().rules
	test/rules.offset_at(Instant.of(0)) == mock.cet
	test/rules.offset_at(Instant.of(mock.spring - 1, 999999999)) == mock.cet
	test/rules.offset_at(Instant.of(mock.spring)) == mock.cest
	test/rules.offset_at(Instant.of(mock.autumn - 1)) == mock.cest
	test/rules.offset_at(Instant.of(mock.autumn)) == mock.cet
	test/rules.offset_at(Instant.of(mock.autumn + 10**9)) == mock.cet

def test_valid_offsets(test):
	rules = mock.central_europe().rules
	def valid(*fields):
		return rules.valid_offsets(LocalDateTime.of(*fields))

	test/valid(2019, 1, 1) == (mock.cet,)
	test/valid(2019, 3, 31, 1, 59, 59, 999999999) == (mock.cet,)
	test/valid(2019, 3, 31, 2) == ()
	test/valid(2019, 3, 31, 2, 59, 59, 999999999) == ()
	test/valid(2019, 3, 31, 3) == (mock.cest,)
	test/valid(2019, 7, 1) == (mock.cest,)
	test/valid(2019, 10, 27, 1, 59, 59) == (mock.cest,)
	test/valid(2019, 10, 27, 2) == (mock.cest, mock.cet)
	test/valid(2019, 10, 27, 2, 59, 59) == (mock.cest, mock.cet)
	test/valid(2019, 10, 27, 3) == (mock.cet,)
	test/valid(2020, 7, 1) == (mock.cet,)

def test_transition_at(test):
	rules = mock.central_europe().rules
	def at(*fields):
		return rules.transition_at(LocalDateTime.of(*fields))

	test/at(2019, 3, 31, 2, 30) == rules.transitions[0]
	test/at(2019, 10, 27, 2, 30) == rules.transitions[1]
	test/at(2019, 3, 31, 3) == None
	test/at(2019, 7, 1) == None
	test/at(2000, 1, 1) == None

def test_footer_offset_at(test):
	rules = mock.central_europe_footer().rules
	test/rules.transitions == ()
	test/rules.fixed_offset == False

	def offset(*fields):
		return rules.offset_at(Instant.of(mock.utc_second(*fields)))

	test/offset(2040, 1, 15) == mock.cet
	test/offset(2040, 3, 25, 0, 59, 59) == mock.cet
	test/offset(2040, 3, 25, 1) == mock.cest
	test/offset(2040, 7, 1, 12) == mock.cest
	test/offset(2040, 10, 28, 0, 59, 59) == mock.cest
	test/offset(2040, 10, 28, 1) == mock.cet
	test/offset(1960, 7, 1) == mock.cest

def test_footer_local(test):
	rules = mock.central_europe_footer().rules
	def valid(*fields):
		return rules.valid_offsets(LocalDateTime.of(*fields))

	test/valid(2040, 1, 1, 0, 30) == (mock.cet,)
	test/valid(2040, 3, 25, 1, 59, 59) == (mock.cet,)
	test/valid(2040, 3, 25, 2, 30) == ()
	test/valid(2040, 3, 25, 3) == (mock.cest,)
	test/valid(2040, 7, 1) == (mock.cest,)
	test/valid(2040, 10, 28, 2, 30) == (mock.cest, mock.cet)
	test/valid(2040, 10, 28, 3) == (mock.cet,)
	test/valid(2040, 12, 31, 23) == (mock.cet,)

	gap = rules.transition_at(LocalDateTime.of(2040, 3, 25, 2, 30))
	test/gap == (mock.utc_second(2040, 3, 25, 1), mock.cet, mock.cest)
	test/gap.is_gap == True
	overlap = rules.transition_at(LocalDateTime.of(2040, 10, 28, 2, 30))
	test/overlap == (mock.utc_second(2040, 10, 28, 1), mock.cest, mock.cet)
	test/rules.transition_at(LocalDateTime.of(2040, 7, 1)) == None

def test_footer_eastern(test):
	est = zone.Offset.of(hours=-5)
	edt = zone.Offset.of(hours=-4)
	region = mock.new_york_footer()
	rules = region.rules

	test/rules.offset_at(Instant.of(mock.utc_second(2040, 3, 11, 6, 59, 59))) == est
	test/rules.offset_at(Instant.of(mock.utc_second(2040, 3, 11, 7))) == edt
	test/rules.offset_at(Instant.of(mock.utc_second(2040, 11, 4, 5, 59, 59))) == edt
	test/rules.offset_at(Instant.of(mock.utc_second(2040, 11, 4, 6))) == est

	test/str(LocalDateTime.of(2040, 7, 1, 12).at_zone(region)) == '2040-07-01T12:00-04:00[Test/Eastern]'
	test/str(LocalDateTime.of(2040, 1, 15, 12).at_zone(region)) == '2040-01-15T12:00-05:00[Test/Eastern]'
	test/str(LocalDateTime.of(2040, 3, 11, 2, 30).at_zone(region)) == '2040-03-11T03:30-04:00[Test/Eastern]'
	test/rules.valid_offsets(LocalDateTime.of(2040, 11, 4, 1, 30)) == (edt, est)

def test_footer_after_transitions(test):
	rules = tzif.rules_from_data(mock.central_europe_tzif(), name='Test/Central')
	def valid(*fields):
		return rules.valid_offsets(LocalDateTime.of(*fields))

	# The listed transitions still govern their own years.
	test/valid(2009, 7, 1) == (mock.cet,)
	test/valid(2019, 7, 1) == (mock.cest,)
	test/valid(2019, 11, 15) == (mock.cet,)
	test/rules.transition_at(LocalDateTime.of(2019, 10, 27, 2, 30)) == rules.transitions[1]

	test/valid(2020, 3, 29, 2, 30) == ()
	test/valid(2020, 7, 1) == (mock.cest,)
	test/valid(2040, 7, 1) == (mock.cest,)
	test/rules.offset_at(Instant.of(mock.utc_second(2019, 11, 15))) == mock.cet
	test/rules.offset_at(Instant.of(mock.utc_second(2040, 7, 1))) == mock.cest

	r = pickle.loads(pickle.dumps(rules))
	test/r.valid_offsets(LocalDateTime.of(2040, 7, 1)) == (mock.cest,)

def test_region(test):
	a = mock.central_europe()
	b = zone.Region('Test/Central', zone.Rules.fixed(mock.cet))
	test/a == b
	test/hash(a) == hash(b)
	test/a != mock.central_europe('Test/Other')
	test/(a == mock.cet) == False
	test/str(a) == 'Test/Central'

	r = pickle.loads(pickle.dumps(a))
	test/r == a
	test/r.rules.transitions == a.rules.transitions

def test_region_open(test):
	d = test.exits.enter_context(tempfile.TemporaryDirectory())
	os.mkdir(os.path.join(d, 'Test'))
	with open(os.path.join(d, 'Test', 'Central'), 'wb') as f:
		f.write(mock.central_europe_tzif())

	r = zone.Region.open('Test/Central', d)
	test/r.identifier == 'Test/Central'
	test/r.rules.transitions == mock.central_europe().rules.transitions
	test/r.rules.footer == 'CET-1CEST,M3.5.0,M10.5.0/3'

	test/errors.RulesError ^ (lambda: zone.Region.open('Test/Missing', d))
	test/errors.RulesError ^ (lambda: zone.Region.open('../Test/Central', d))
	test/errors.RulesError ^ (lambda: zone.Region.open('/etc/passwd', d))

def test_region_environment(test):
	d = test.exits.enter_context(tempfile.TemporaryDirectory())
	with open(os.path.join(d, 'Central'), 'wb') as f:
		f.write(mock.central_europe_tzif())

	saved = {k: os.environ.get(k) for k in (tzif.tzenviron, tzif.tzdirenviron)}
	def restore():
		for k, v in saved.items():
			if v is None:
				os.environ.pop(k, None)
			else:
				os.environ[k] = v
	test.exits.callback(restore)

	os.environ[tzif.tzdirenviron] = d
	os.environ[tzif.tzenviron] = ':Central'
	test/tzif.environment_zone() == 'Central'
	r = zone.Region.open()
	test/r.identifier == 'Central'
	test/len(r.rules.transitions) == 2

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
