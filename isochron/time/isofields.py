"""
# Fields and units specific to the ISO-8601 calendar system.

# The fields are derived from primitive fields and participate in the operations
# of temporal values through the protocol in &.abstract: the temporal value asks
# the field to compute itself.

#!syntax/python
	d = points.LocalDate.of(2008, 12, 29)
	assert d.select(isofields.WEEK_BASED_YEAR) == 2009
	assert d.select(isofields.WEEK_OF_WEEK_BASED_YEAR) == 1
	assert d.select(isofields.QUARTER_OF_YEAR) == 4

# [ Elements ]
# /DAY_OF_QUARTER/
	# The day of the quarter; `1 - 90/92`.
# /QUARTER_OF_YEAR/
	# The quarter of the year; `1 - 4`.
# /WEEK_OF_WEEK_BASED_YEAR/
	# The week of the week-based-year; `1 - 52/53`.
# /WEEK_BASED_YEAR/
	# The ISO-8601 week-based-year.
# /WEEK_BASED_YEARS/
	# Unit of week-based-years; estimated as the mean Gregorian year.
# /QUARTER_YEARS/
	# Unit of quarters; estimated as a quarter of the mean Gregorian year.
"""
from . import gregorian
from . import week
from . import ranges
from . import errors
from . import abstract
from . import points
from . import chronology as chronologies
from .standard import (
	seconds_per_year,
	DAYS, WEEKS, MONTHS, YEARS, FOREVER,
	DAY_OF_WEEK, DAY_OF_YEAR, EPOCH_DAY, MONTH_OF_YEAR, YEAR,
)

#: Leading days of each quarter, indexed by `((month - 1) // 3) + (4 if leap else 0)`.
quarter_days = (0, 90, 181, 273, 0, 91, 182, 274)

def iso_date(temporal):
	"""
	# The ISO &points.LocalDate of the epoch-day selected from &temporal.
	"""
	return chronologies.ISO.date_from_epoch_day(temporal.select(EPOCH_DAY))

def week_based_year_of(date):
	return week.week_based_year_of(date.year, date.day_of_year, date.day_of_week - 1)

def week_of(date):
	return week.week_of(date.year, date.day_of_year, date.day_of_week - 1)

def week_range_of(date):
	return ranges.ValueRange.of(1, week.weeks_in(week_based_year_of(date)))

def quarter_range(year, quarter):
	"""
	# The range of the day of quarter for the given &quarter of &year.
	"""
	if quarter == 1:
		return ranges.ValueRange.of(1, 91 if gregorian.year_is_leap(year) else 90)
	elif quarter == 2:
		return ranges.ValueRange.of(1, 91)
	return ranges.ValueRange.of(1, 92)

class Unit(object):
	"""
	# Base class of the ISO units.
	"""
	__slots__ = ()

	identifier = None
	name = None
	duration = None
	estimated = True
	nanos = None
	days = None
	months = None

	def __repr__(self):
		return '<%s.%s>' %(__name__, self.identifier)

	def __str__(self):
		return self.name

	def __reduce__(self):
		return self.identifier

	def __lt__(self, ob):
		return self.duration < ob.duration

	def __gt__(self, ob):
		return self.duration > ob.duration

	@property
	def time_based(self):
		return False

	@property
	def date_based(self):
		return True

	def supported(self, temporal):
		return temporal.supports(EPOCH_DAY)

abstract.Unit.register(Unit)

class WeekBasedYears(Unit):
	__slots__ = ()

	identifier = 'WEEK_BASED_YEARS'
	name = 'WeekBasedYears'
	duration = seconds_per_year

	def elapse(self, temporal, amount):
		return temporal.update(WEEK_BASED_YEAR, temporal.select(WEEK_BASED_YEAR) + amount)

	def measure(self, start, end):
		return end.select(WEEK_BASED_YEAR) - start.select(WEEK_BASED_YEAR)

class QuarterYears(Unit):
	__slots__ = ()

	identifier = 'QUARTER_YEARS'
	name = 'QuarterYears'
	duration = seconds_per_year // 4

	def elapse(self, temporal, amount):
		# Whole years first so that the month addition stays within a year.
		years = points.truncate(amount, 4)
		months = (amount - (years * 4)) * 3
		return temporal.elapse(years, YEARS).elapse(months, MONTHS)

	def measure(self, start, end):
		return points.truncate(start.measure(end, MONTHS), 3)

WEEK_BASED_YEARS = WeekBasedYears()
QUARTER_YEARS = QuarterYears()

class Field(object):
	"""
	# Base class of the ISO fields.

	# The set of fields is closed; each subclass has a single instance.
	"""
	__slots__ = ()

	identifier = None
	name = None
	base_unit = None
	range_unit = None
	range = None

	def __repr__(self):
		return '<%s.%s>' %(__name__, self.identifier)

	def __str__(self):
		return self.name

	def __reduce__(self):
		return self.identifier

	@property
	def time_based(self):
		return False

	@property
	def date_based(self):
		return True

	def check(self, temporal):
		if not self.supported(temporal):
			raise errors.UnsupportedFieldError(self, temporal)

	def resolve(self, builder, value):
		return False

abstract.Field.register(Field)

class DayOfQuarter(Field):
	__slots__ = ()

	identifier = 'DAY_OF_QUARTER'
	name = 'DayOfQuarter'
	base_unit = DAYS
	range_unit = QUARTER_YEARS
	range = ranges.ValueRange.of(1, 90, 92)

	def supported(self, temporal):
		return (
			temporal.supports(DAY_OF_YEAR) and
			temporal.supports(MONTH_OF_YEAR) and
			temporal.supports(YEAR) and
			getattr(temporal, 'chronology', None) == chronologies.ISO
		)

	def range_of(self, temporal):
		self.check(temporal)
		quarter = temporal.select(QUARTER_OF_YEAR)
		if quarter not in (1, 2, 3, 4):
			return self.range
		return quarter_range(temporal.select(YEAR), quarter)

	def select(self, temporal):
		self.check(temporal)
		doy = temporal.select(DAY_OF_YEAR)
		moy = temporal.select(MONTH_OF_YEAR)
		leap = chronologies.ISO.is_leap_year(temporal.select(YEAR))
		return doy - quarter_days[((moy - 1) // 3) + (4 if leap else 0)]

	def update(self, temporal, value):
		"""
		# Shift the day of year by the difference to &value.

		# Values up to 92 are accepted in any quarter; the excess moves the date
		# into the following quarter.
		"""
		current = self.select(temporal)
		self.range.validate(value, self)
		return temporal.update(DAY_OF_YEAR, temporal.select(DAY_OF_YEAR) + (value - current))

class QuarterOfYear(Field):
	__slots__ = ()

	identifier = 'QUARTER_OF_YEAR'
	name = 'QuarterOfYear'
	base_unit = QUARTER_YEARS
	range_unit = YEARS
	range = ranges.ValueRange.of(1, 4)

	def supported(self, temporal):
		return (
			temporal.supports(MONTH_OF_YEAR) and
			getattr(temporal, 'chronology', None) == chronologies.ISO
		)

	def range_of(self, temporal):
		self.check(temporal)
		return self.range

	def select(self, temporal):
		self.check(temporal)
		return (temporal.select(MONTH_OF_YEAR) + 2) // 3

	def update(self, temporal, value):
		current = self.select(temporal)
		self.range.validate(value, self)
		return temporal.update(MONTH_OF_YEAR, temporal.select(MONTH_OF_YEAR) + ((value - current) * 3))

	def resolve(self, builder, value):
		"""
		# Combine the year, quarter and day of quarter into an epoch-day.
		"""
		values = builder.query(YEAR, QUARTER_OF_YEAR, DAY_OF_QUARTER)
		if values is None:
			return False

		year = YEAR.validate(values[0])
		quarter = self.range.validate(values[1], self)
		doq = quarter_range(year, quarter).validate(values[2], DAY_OF_QUARTER)

		days = gregorian.epoch_day(year, ((quarter - 1) * 3) + 1, 1) + (doq - 1)
		builder.add(EPOCH_DAY, days)
		builder.remove(YEAR, QUARTER_OF_YEAR, DAY_OF_QUARTER)
		return True

class WeekOfWeekBasedYear(Field):
	__slots__ = ()

	identifier = 'WEEK_OF_WEEK_BASED_YEAR'
	name = 'WeekOfWeekBasedYear'
	base_unit = WEEKS
	range_unit = WEEK_BASED_YEARS
	range = ranges.ValueRange.of(1, 52, 53)

	def supported(self, temporal):
		return temporal.supports(EPOCH_DAY)

	def range_of(self, temporal):
		self.check(temporal)
		return week_range_of(iso_date(temporal))

	def select(self, temporal):
		self.check(temporal)
		return week_of(iso_date(temporal))

	def update(self, temporal, value):
		"""
		# Move by the number of weeks between the current week and &value.
		"""
		ranges.ValueRange.of(1, 53).validate(value, self)
		return temporal.elapse(value - self.select(temporal), WEEKS)

class WeekBasedYear(Field):
	__slots__ = ()

	identifier = 'WEEK_BASED_YEAR'
	name = 'WeekBasedYear'
	base_unit = WEEK_BASED_YEARS
	range_unit = FOREVER
	range = YEAR.range

	def supported(self, temporal):
		return temporal.supports(EPOCH_DAY)

	def range_of(self, temporal):
		self.check(temporal)
		return self.range

	def select(self, temporal):
		self.check(temporal)
		return week_based_year_of(iso_date(temporal))

	def update(self, temporal, value):
		"""
		# Move to the same week and day of week in the week-based-year &value.

		# The week is held while the date is moved through day 180 of the target
		# year. Week 53 becomes week 52 when the target has no 53rd week.
		"""
		self.check(temporal)
		self.range.validate(value, self)

		date = iso_date(temporal)
		held = week_of(date)
		dow = date.day_of_week

		date = date.update(DAY_OF_YEAR, 180).update(YEAR, value)
		if held == 53 and week.weeks_in(value) == 52:
			held = 52
		date = date.elapse(held - week_of(date), WEEKS)
		date = date.plus_days(dow - date.day_of_week)
		return temporal.update(EPOCH_DAY, date.epoch_day)

	def resolve(self, builder, value):
		"""
		# Combine the week-based-year, week and day of week into an epoch-day.
		"""
		values = builder.query(WEEK_BASED_YEAR, WEEK_OF_WEEK_BASED_YEAR, DAY_OF_WEEK)
		if values is None:
			return False

		wby = self.range.validate(values[0], self)
		weeks = ranges.ValueRange.of(1, week.weeks_in(wby))
		wowby = weeks.validate(values[1], WEEK_OF_WEEK_BASED_YEAR)
		dow = DAY_OF_WEEK.validate(values[2])

		date = points.LocalDate.of(wby, 2, 1)
		date = WEEK_OF_WEEK_BASED_YEAR.update(date, wowby)
		date = date.update(DAY_OF_WEEK, dow)

		builder.add(EPOCH_DAY, date.epoch_day)
		builder.remove(WEEK_BASED_YEAR, WEEK_OF_WEEK_BASED_YEAR, DAY_OF_WEEK)
		return True

DAY_OF_QUARTER = DayOfQuarter()
QUARTER_OF_YEAR = QuarterOfYear()
WEEK_OF_WEEK_BASED_YEAR = WeekOfWeekBasedYear()
WEEK_BASED_YEAR = WeekBasedYear()

fields = (DAY_OF_QUARTER, QUARTER_OF_YEAR, WEEK_OF_WEEK_BASED_YEAR, WEEK_BASED_YEAR)
units = (WEEK_BASED_YEARS, QUARTER_YEARS)
