"""
# POSIX TZ strings as found in the footer of TZif files.

# The footer describes the offsets in effect after the last transition listed
# in the file: a standard offset and, optionally, a daylight offset with the
# yearly rules that switch between them.

#!syntax/python
	tz = posix.parse('CET-1CEST,M3.5.0,M10.5.0/3')
	assert tz.std == 3600 and tz.dst == 7200

# Offsets in the string count west of Greenwich; the parsed offsets are
# seconds east of UTC like every other offset in the package.

# [ Elements ]
# /default_rules/
	# The rules used when the string names a daylight zone without rules.
"""
import re
from . import errors
from . import gregorian
from . import week
from .standard import seconds_per_day

name_pattern = re.compile(r'<([^>]*)>|([^\d,+\-<>:]{3,})')
offset_pattern = re.compile(r'([+-]?)(\d{1,3})(?::(\d{1,2}))?(?::(\d{1,2}))?')
date_pattern = re.compile(r'M(\d{1,2})\.(\d)\.(\d)|J(\d{1,3})|(\d{1,3})')

#: The time of day of a change when the rule does not give one.
default_time = 7200

def seconds(sign, hours, minutes, seconds):
	total = (int(hours) * 3600) + (int(minutes or 0) * 60) + int(seconds or 0)
	return -total if sign == '-' else total

class Change(tuple):
	"""
	# A yearly change of offset: `(form, value, time)`.

	# The &form is `'M'` with a `(month, week, weekday)` value, `'J'` with a
	# one-based day of year that never counts February 29, or `'n'` with a
	# zero-based day of year that does. &time is the local time of the change
	# in seconds observed with the offset in effect before it.
	"""
	__slots__ = ()

	@property
	def form(self):
		return self[0]

	@property
	def value(self):
		return self[1]

	@property
	def time(self):
		return self[2]

	def epoch_day(self, year):
		"""
		# The epoch-day on which the change occurs in &year.
		"""
		form, value = self[0], self[1]
		if form == 'M':
			month, nth, weekday = value
			first = gregorian.epoch_day(year, month, 1)
			# Sunday is zero in the string and seven in ISO.
			target = weekday or 7
			day = first + ((target - week.day_of_week(first)) % 7) + ((nth - 1) * 7)
			last = first + gregorian.days_in_month(year, month) - 1
			while day > last:
				day -= 7
			return day
		elif form == 'J':
			if value >= 60 and gregorian.year_is_leap(year):
				value += 1
			return gregorian.epoch_day(year, 1, 1) + value - 1
		else:
			return gregorian.epoch_day(year, 1, 1) + value

class TZ(tuple):
	"""
	# A parsed POSIX TZ string: `(std_name, std, dst_name, dst, start, end)`.

	# &dst, &start and &end are &None when the zone has no daylight offset.
	"""
	__slots__ = ()

	@property
	def std_name(self):
		return self[0]

	@property
	def std(self):
		return self[1]

	@property
	def dst_name(self):
		return self[2]

	@property
	def dst(self):
		return self[3]

	@property
	def start(self):
		return self[4]

	@property
	def end(self):
		return self[5]

	def changes(self, year):
		"""
		# The `(epoch_second, before, after)` changes of &year ordered by their instant.
		"""
		if self[3] is None:
			return ()

		std, dst, start, end = self[1], self[3], self[4], self[5]
		pair = [
			((start.epoch_day(year) * seconds_per_day) + start.time - std, std, dst),
			((end.epoch_day(year) * seconds_per_day) + end.time - dst, dst, std),
		]
		pair.sort()
		return tuple(pair)

	def offset_at(self, second):
		"""
		# The offset in effect at the epoch &second.
		"""
		if self[3] is None:
			return self[1]

		year = gregorian.date_from_epoch_day((second + self[1]) // seconds_per_day)[0]
		changes = self.changes(year - 1) + self.changes(year)
		current = changes[0][1]
		for x in changes:
			if x[0] > second:
				break
			current = x[2]
		return current

#: US rules; the usual choice for daylight zones without rules.
default_rules = (
	Change(('M', (3, 2, 0), default_time)),
	Change(('M', (11, 1, 0), default_time)),
)

def parse_name(string, position):
	m = name_pattern.match(string, position)
	if m is None:
		raise errors.RulesError("invalid zone name in POSIX TZ string: " + repr(string))
	return m.group(1) if m.group(1) is not None else m.group(2), m.end()

def parse_offset(string, position):
	m = offset_pattern.match(string, position)
	if m is None:
		raise errors.RulesError("invalid offset in POSIX TZ string: " + repr(string))
	return seconds(*m.groups()), m.end()

def parse_change(string, position):
	m = date_pattern.match(string, position)
	if m is None:
		raise errors.RulesError("invalid rule in POSIX TZ string: " + repr(string))
	month, nth, weekday, julian, zero = m.groups()
	position = m.end()

	if month is not None:
		value = (int(month), int(nth), int(weekday))
		if not (1 <= value[0] <= 12 and 1 <= value[1] <= 5 and 0 <= value[2] <= 6):
			raise errors.RulesError("invalid M rule in POSIX TZ string: " + repr(string))
		form = 'M'
	elif julian is not None:
		value = int(julian)
		if not (1 <= value <= 365):
			raise errors.RulesError("invalid J rule in POSIX TZ string: " + repr(string))
		form = 'J'
	else:
		value = int(zero)
		if not (0 <= value <= 365):
			raise errors.RulesError("invalid day rule in POSIX TZ string: " + repr(string))
		form = 'n'

	time = default_time
	if string.startswith('/', position):
		# Hours may exceed a day or be negative.
		time, position = parse_offset(string, position + 1)

	return Change((form, value, time)), position

def parse(string):
	"""
	# Parse the POSIX TZ &string into a &TZ instance.
	"""
	std_name, position = parse_name(string, 0)
	std, position = parse_offset(string, position)
	std = -std

	if position == len(string):
		return TZ((std_name, std, None, None, None, None))

	dst_name, position = parse_name(string, position)
	dst = std + 3600
	if position < len(string) and string[position] != ',':
		dst, position = parse_offset(string, position)
		dst = -dst

	if position == len(string):
		start, end = default_rules
	else:
		if string[position] != ',':
			raise errors.RulesError("invalid POSIX TZ string: " + repr(string))
		start, position = parse_change(string, position + 1)
		if not string.startswith(',', position):
			raise errors.RulesError("missing end rule in POSIX TZ string: " + repr(string))
		end, position = parse_change(string, position + 1)

	if position != len(string):
		raise errors.RulesError("trailing data in POSIX TZ string: " + repr(string))

	return TZ((std_name, std, dst_name, dst, start, end))
