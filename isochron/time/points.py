"""
# Points on the time line and local, zone-less, dates and date-times.

# [ Elements ]
# /Instant/
	# An exact point on the time line: seconds since 1970-01-01T00:00Z and
	# a nanosecond adjustment.
# /LocalDate/
	# A chronology bound calendar date: `(year, month, day, chronology)`.
# /LocalDateTime/
	# A &LocalDate and the nanosecond of the day: `(date, nano_of_day)`.

# Local values are immutable tuples. Field access follows the protocol
# documented in &.abstract: primitive fields from &.standard are answered
# directly, other fields are asked to compute themselves.

#!syntax/python
	d = LocalDate.of(2009, 1, 1)
	assert d.select(standard.DAY_OF_WEEK) == 4
	assert d.elapse(1, standard.MONTHS) == LocalDate.of(2009, 2, 1)
"""
from . import gregorian
from . import week
from . import ranges
from . import errors
from . import abstract
from . import chronology as chronologies
from .standard import (
	Field, Unit,
	nanos_per_second, nanos_per_day, seconds_per_day,
	DAYS, FOREVER,
	DAY_OF_WEEK, DAY_OF_MONTH, DAY_OF_YEAR, EPOCH_DAY,
	MONTH_OF_YEAR, PROLEPTIC_MONTH, YEAR,
	NANO_OF_DAY, HOUR_OF_DAY, MINUTE_OF_HOUR, SECOND_OF_MINUTE, NANO_OF_SECOND,
	INSTANT_SECONDS, OFFSET_SECONDS,
)

def truncate(n, d):
	"""
	# Integer division rounding toward zero.
	"""
	q = abs(n) // abs(d)
	return q if (n < 0) == (d < 0) else -q

def format_year(year):
	if abs(year) < 1000:
		return ('-%04d' if year < 0 else '%04d') %(abs(year),)
	if year > 9999:
		return '+' + str(year)
	return str(year)

def format_time(nano_of_day):
	"""
	# Format the time of day as `HH:MM`, adding seconds and fractions only when present.
	"""
	seconds, nano = divmod(nano_of_day, nanos_per_second)
	minutes, second = divmod(seconds, 60)
	hour, minute = divmod(minutes, 60)

	s = '%02d:%02d' %(hour, minute)
	if second or nano:
		s += ':%02d' %(second,)
		if nano:
			if nano % 1000000 == 0:
				s += '.%03d' %(nano // 1000000,)
			elif nano % 1000 == 0:
				s += '.%06d' %(nano // 1000,)
			else:
				s += '.%09d' %(nano,)
	return s

class Instant(tuple):
	"""
	# A point on the time line with nanosecond precision.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, second, nano=0):
		"""
		# Construct an instant normalizing &nano into `0 - 999999999`.
		"""
		s, n = divmod(nano, nanos_per_second)
		return Class((second + s, n))

	@property
	def epoch_second(self):
		return self[0]

	@property
	def nano(self):
		return self[1]

	def elapse(self, seconds=0, nanos=0):
		return self.of(self[0] + seconds, self[1] + nanos)

	def leads(self, instant):
		return self < instant

	def follows(self, instant):
		return self > instant

	def __str__(self):
		local = chronologies.ISO.datetime_from_epoch_second(self[0], self[1], 0)
		return str(local) + 'Z'

	def __repr__(self):
		return "(time.instant@'%s')" %(str(self),)

class LocalDate(tuple):
	"""
	# A date without a time-zone in a &chronologies.Chronology.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, year, month, day, chronology=None):
		"""
		# Construct a validated date; &chronology defaults to ISO.
		"""
		if chronology is None:
			chronology = chronologies.ISO
		chronology.validate(year, month, day)
		return Class((year, month, day, chronology))

	@classmethod
	def from_epoch_day(Class, days, chronology=None):
		if chronology is None:
			chronology = chronologies.ISO
		return chronology.date_from_epoch_day(days)

	@classmethod
	def from_day_of_year(Class, year, doy, chronology=None):
		"""
		# Construct the date of the one-based day of year, &doy.
		"""
		if chronology is None:
			chronology = chronologies.ISO
		YEAR.validate(year)
		ranges.ValueRange.of(1, gregorian.days_in_year(year)).validate(doy, DAY_OF_YEAR)
		return Class(gregorian.date_from_day_of_year(year, doy) + (chronology,))

	@classmethod
	def previous_valid(Class, year, month, day, chronology):
		"""
		# Construct the date clamping &day to the length of the month.
		"""
		YEAR.validate(year)
		day = min(day, gregorian.days_in_month(year, month))
		return Class((year, month, day, chronology))

	@property
	def year(self):
		return self[0]

	@property
	def month(self):
		return self[1]

	@property
	def day(self):
		return self[2]

	@property
	def chronology(self):
		return self[3]

	@property
	def epoch_day(self):
		return gregorian.epoch_day(self[0], self[1], self[2])

	@property
	def day_of_year(self):
		return gregorian.day_of_year(self[0], self[1], self[2])

	@property
	def day_of_week(self):
		"""
		# The one-based ISO day of week; Monday is one.
		"""
		return week.day_of_week(self.epoch_day)

	@property
	def proleptic_month(self):
		return (self[0] * 12) + (self[1] - 1)

	@property
	def leap(self):
		return self[3].is_leap_year(self[0])

	@property
	def length_of_month(self):
		return gregorian.days_in_month(self[0], self[1])

	@property
	def length_of_year(self):
		return gregorian.days_in_year(self[0])

	def plus_days(self, days):
		if days == 0:
			return self
		return self[3].date_from_epoch_day(self.epoch_day + days)

	def plus_months(self, months):
		if months == 0:
			return self
		year, month0 = divmod(self.proleptic_month + months, 12)
		return self.previous_valid(year, month0 + 1, self[2], self[3])

	def at_time(self, hour=0, minute=0, second=0, nano=0):
		return LocalDateTime.of_date(self, LocalDateTime.nano_of_day_of(hour, minute, second, nano))

	def supports(self, field):
		if isinstance(field, Field):
			return field.date_based
		return field is not None and field.supported(self)

	def supports_unit(self, unit):
		if isinstance(unit, Unit):
			return unit.date_based
		return unit is not None and unit.supported(self)

	def range(self, field):
		if isinstance(field, Field):
			if not field.date_based:
				raise errors.UnsupportedFieldError(field, self)
			if field is DAY_OF_MONTH:
				return ranges.ValueRange.of(1, self.length_of_month)
			if field is DAY_OF_YEAR:
				return ranges.ValueRange.of(1, self.length_of_year)
			return field.range
		return field.range_of(self)

	def select(self, field):
		if isinstance(field, Field):
			if field is DAY_OF_WEEK:
				return self.day_of_week
			elif field is DAY_OF_MONTH:
				return self[2]
			elif field is DAY_OF_YEAR:
				return self.day_of_year
			elif field is EPOCH_DAY:
				return self.epoch_day
			elif field is MONTH_OF_YEAR:
				return self[1]
			elif field is PROLEPTIC_MONTH:
				return self.proleptic_month
			elif field is YEAR:
				return self[0]
			raise errors.UnsupportedFieldError(field, self)
		return field.select(self)

	def update(self, field, value):
		"""
		# Construct and return a new date with the &field set to &value.
		"""
		if isinstance(field, Field):
			year, month, day, chronology = self
			if field is DAY_OF_WEEK:
				DAY_OF_WEEK.validate(value)
				return self.plus_days(value - self.day_of_week)
			elif field is DAY_OF_MONTH:
				return self.of(year, month, value, chronology)
			elif field is DAY_OF_YEAR:
				return self.from_day_of_year(year, value, chronology)
			elif field is EPOCH_DAY:
				return chronology.date_from_epoch_day(value)
			elif field is MONTH_OF_YEAR:
				MONTH_OF_YEAR.validate(value)
				return self.previous_valid(year, value, day, chronology)
			elif field is PROLEPTIC_MONTH:
				PROLEPTIC_MONTH.validate(value)
				return self.plus_months(value - self.proleptic_month)
			elif field is YEAR:
				YEAR.validate(value)
				return self.previous_valid(value, month, day, chronology)
			raise errors.UnsupportedFieldError(field, self)
		return field.update(self, value)

	def elapse(self, amount, unit):
		if isinstance(unit, Unit):
			if unit.days is not None:
				return self.plus_days(amount * unit.days)
			if unit.months is not None:
				return self.plus_months(amount * unit.months)
			raise errors.UnsupportedFieldError(unit, self)
		return unit.elapse(self, amount)

	def rollback(self, amount, unit):
		return self.elapse(-amount, unit)

	def months_until(self, end):
		packed1 = (self.proleptic_month * 32) + self[2]
		packed2 = (end.proleptic_month * 32) + end[2]
		return truncate(packed2 - packed1, 32)

	def measure(self, end, unit):
		"""
		# The number of complete &unit between this date and &end.
		"""
		if isinstance(end, LocalDateTime):
			end = end.date
		elif not isinstance(end, LocalDate):
			raise errors.IncompatibleTypes("cannot measure %s to %s" %(
				self.__class__.__name__, end.__class__.__name__))
		if end.chronology != self.chronology:
			raise errors.ChronologyError("cannot measure between different chronologies")

		if isinstance(unit, Unit):
			if unit.days is not None:
				return truncate(end.epoch_day - self.epoch_day, unit.days)
			if unit.months is not None:
				return truncate(self.months_until(end), unit.months)
			raise errors.UnsupportedFieldError(unit, self)
		return unit.measure(self, end)

	def __str__(self):
		return '%s-%02d-%02d' %(format_year(self[0]), self[1], self[2])

	def __repr__(self):
		return "(time.date@'%s')" %(str(self),)

class LocalDateTime(tuple):
	"""
	# A date-time without a time-zone in a &chronologies.Chronology.
	"""
	__slots__ = ()

	@staticmethod
	def nano_of_day_of(hour, minute, second, nano):
		HOUR_OF_DAY.validate(hour)
		MINUTE_OF_HOUR.validate(minute)
		SECOND_OF_MINUTE.validate(second)
		NANO_OF_SECOND.validate(nano)
		return (((((hour * 60) + minute) * 60) + second) * nanos_per_second) + nano

	@classmethod
	def of(Class, year, month, day, hour=0, minute=0, second=0, nano=0, chronology=None):
		date = LocalDate.of(year, month, day, chronology)
		return Class((date, Class.nano_of_day_of(hour, minute, second, nano)))

	@classmethod
	def of_date(Class, date, nano_of_day=0):
		NANO_OF_DAY.validate(nano_of_day)
		return Class((date, nano_of_day))

	@classmethod
	def from_epoch_second(Class, second, nano, offset, chronology=None):
		if chronology is None:
			chronology = chronologies.ISO
		return chronology.datetime_from_epoch_second(second, nano, offset)

	@property
	def date(self):
		return self[0]

	@property
	def nano_of_day(self):
		return self[1]

	@property
	def chronology(self):
		return self[0][3]

	@property
	def year(self):
		return self[0][0]

	@property
	def month(self):
		return self[0][1]

	@property
	def day(self):
		return self[0][2]

	@property
	def hour(self):
		return self[1] // (3600 * nanos_per_second)

	@property
	def minute(self):
		return (self[1] // (60 * nanos_per_second)) % 60

	@property
	def second(self):
		return (self[1] // nanos_per_second) % 60

	@property
	def nano(self):
		return self[1] % nanos_per_second

	@property
	def second_of_day(self):
		return self[1] // nanos_per_second

	def to_epoch_second(self, offset):
		"""
		# The seconds since 1970-01-01T00:00Z of this date-time at the &offset.
		"""
		return (self[0].epoch_day * seconds_per_day) + self.second_of_day - int(offset)

	def to_instant(self, offset):
		return Instant((self.to_epoch_second(offset), self.nano))

	def at_zone(self, zone, preferred=None):
		"""
		# Resolve the date-time against the &zone; see &.zoned.resolve_best.
		"""
		from . import zoned
		return zoned.ZonedDateTime.of_best(self, zone, preferred)

	def plus_nanos(self, nanos):
		if nanos == 0:
			return self
		days, nano_of_day = divmod(self[1] + nanos, nanos_per_day)
		return self.__class__((self[0].plus_days(days), nano_of_day))

	def supports(self, field):
		if isinstance(field, Field):
			return field is not INSTANT_SECONDS and field is not OFFSET_SECONDS
		return field is not None and field.supported(self)

	def supports_unit(self, unit):
		if isinstance(unit, Unit):
			return unit is not FOREVER
		return unit is not None and unit.supported(self)

	def range(self, field):
		if isinstance(field, Field):
			if field.time_based:
				return field.range
			return self[0].range(field)
		return field.range_of(self)

	@staticmethod
	def _divisors(field):
		base = field.base_unit.nanos
		limit = field.range_unit.nanos
		if limit is None:
			# DAYS; the only date based range unit of a time field.
			limit = nanos_per_day
		return base, limit

	def select(self, field):
		if isinstance(field, Field):
			if field.time_based:
				base, limit = self._divisors(field)
				return (self[1] % limit) // base
			return self[0].select(field)
		return field.select(self)

	def update(self, field, value):
		"""
		# Construct and return a new date-time with the &field set to &value.
		"""
		if isinstance(field, Field):
			if field.time_based:
				field.validate(value)
				base, limit = self._divisors(field)
				current = (self[1] % limit) // base
				return self.__class__((self[0], self[1] + ((value - current) * base)))
			return self.__class__((self[0].update(field, value), self[1]))
		return field.update(self, value)

	def elapse(self, amount, unit):
		if isinstance(unit, Unit):
			if unit.nanos is not None:
				return self.plus_nanos(amount * unit.nanos)
			return self.__class__((self[0].elapse(amount, unit), self[1]))
		return unit.elapse(self, amount)

	def rollback(self, amount, unit):
		return self.elapse(-amount, unit)

	def measure(self, end, unit):
		"""
		# The number of complete &unit between this date-time and &end.
		"""
		if not isinstance(end, LocalDateTime):
			raise errors.IncompatibleTypes("cannot measure %s to %s" %(
				self.__class__.__name__, end.__class__.__name__))
		if end.chronology != self.chronology:
			raise errors.ChronologyError("cannot measure between different chronologies")

		if not isinstance(unit, Unit):
			return unit.measure(self, end)

		if unit.nanos is not None:
			days = end[0].epoch_day - self[0].epoch_day
			nanos = end[1] - self[1]
			if days > 0 and nanos < 0:
				days -= 1
				nanos += nanos_per_day
			elif days < 0 and nanos > 0:
				days += 1
				nanos -= nanos_per_day
			return truncate((days * nanos_per_day) + nanos, unit.nanos)

		end_date = end[0]
		if end_date > self[0] and end[1] < self[1]:
			end_date = end_date.plus_days(-1)
		elif end_date < self[0] and end[1] > self[1]:
			end_date = end_date.plus_days(1)
		return self[0].measure(end_date, unit)

	def __str__(self):
		return str(self[0]) + 'T' + format_time(self[1])

	def __repr__(self):
		return "(time.local@'%s')" %(str(self),)

abstract.Temporal.register(LocalDate)
abstract.Temporal.register(LocalDateTime)
