"""
# Primitive fields and units.

# The primitive set is answered directly by the temporal values in &.points and
# &.zoned. Any other &abstract.Field or &abstract.Unit is dispatched to
# the field or unit object itself.

# [ Units ]
# /NANOS/
	# One nanosecond.
# /SECONDS/
	# One second.
# /DAYS/
	# One day; estimated, as days in a zone may be 23 or 25 hours.
# /MONTHS/
	# One Gregorian month; estimated as a twelfth of the mean Gregorian year.
# /FOREVER/
	# An unbounded unit used as the range unit of fields without bounds.
"""
import fractions
from . import ranges
from . import abstract

nanos_per_second = 1000000000
seconds_per_day = 86400
nanos_per_day = nanos_per_second * seconds_per_day

#: Mean length of the Gregorian year in seconds: 365.2425 days.
seconds_per_year = 31556952

class Unit(object):
	"""
	# A primitive unit of time.

	# Time based units know their length in nanoseconds, &nanos. Date based units
	# are expressed as either &days or &months so that month lengths can vary.
	"""
	__slots__ = ('identifier', 'name', 'duration', 'estimated', 'nanos', 'days', 'months')

	def __init__(self, identifier, name, duration, estimated, nanos=None, days=None, months=None):
		self.identifier = identifier
		self.name = name
		self.duration = duration
		self.estimated = estimated
		self.nanos = nanos
		self.days = days
		self.months = months

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
		return self.nanos is not None

	@property
	def date_based(self):
		return self.days is not None or self.months is not None

	def supported(self, temporal):
		return temporal.supports_unit(self)

	def elapse(self, temporal, amount):
		return temporal.elapse(amount, self)

	def measure(self, start, end):
		return start.measure(end, self)
abstract.Unit.register(Unit)

F = fractions.Fraction

NANOS = Unit('NANOS', 'Nanos', F(1, nanos_per_second), False, nanos=1)
MICROS = Unit('MICROS', 'Micros', F(1, 1000000), False, nanos=1000)
MILLIS = Unit('MILLIS', 'Millis', F(1, 1000), False, nanos=1000000)
SECONDS = Unit('SECONDS', 'Seconds', 1, False, nanos=nanos_per_second)
MINUTES = Unit('MINUTES', 'Minutes', 60, False, nanos=60 * nanos_per_second)
HOURS = Unit('HOURS', 'Hours', 3600, False, nanos=3600 * nanos_per_second)
HALF_DAYS = Unit('HALF_DAYS', 'HalfDays', 43200, False, nanos=43200 * nanos_per_second)
DAYS = Unit('DAYS', 'Days', seconds_per_day, True, days=1)
WEEKS = Unit('WEEKS', 'Weeks', 7 * seconds_per_day, True, days=7)
MONTHS = Unit('MONTHS', 'Months', F(seconds_per_year, 12), True, months=1)
YEARS = Unit('YEARS', 'Years', seconds_per_year, True, months=12)
DECADES = Unit('DECADES', 'Decades', seconds_per_year * 10, True, months=120)
CENTURIES = Unit('CENTURIES', 'Centuries', seconds_per_year * 100, True, months=1200)
MILLENNIA = Unit('MILLENNIA', 'Millennia', seconds_per_year * 1000, True, months=12000)
FOREVER = Unit('FOREVER', 'Forever', (2**63 - 1), True)

del F

units = (
	NANOS, MICROS, MILLIS, SECONDS, MINUTES, HOURS, HALF_DAYS,
	DAYS, WEEKS, MONTHS, YEARS, DECADES, CENTURIES, MILLENNIA,
	FOREVER,
)

class Field(object):
	"""
	# A primitive field of date-time.
	"""
	__slots__ = ('identifier', 'name', 'base_unit', 'range_unit', 'range')

	def __init__(self, identifier, name, base_unit, range_unit, range):
		self.identifier = identifier
		self.name = name
		self.base_unit = base_unit
		self.range_unit = range_unit
		self.range = range

	def __repr__(self):
		return '<%s.%s>' %(__name__, self.identifier)

	def __str__(self):
		return self.name

	def __reduce__(self):
		return self.identifier

	@property
	def time_based(self):
		# Fields ranging over days are time fields; instant and offset seconds are neither.
		return self.base_unit.time_based and self.range_unit is not FOREVER

	@property
	def date_based(self):
		return self.base_unit.date_based

	def validate(self, value):
		return self.range.validate(value, self)

	def supported(self, temporal):
		return temporal.supports(self)

	def range_of(self, temporal):
		return temporal.range(self)

	def select(self, temporal):
		return temporal.select(self)

	def update(self, temporal, value):
		return temporal.update(self, value)

	def resolve(self, builder, value):
		# Primitive combinations are merged by the builder.
		return False
abstract.Field.register(Field)

R = ranges.ValueRange.of
max_year = 999999999
min_year = -999999999

NANO_OF_SECOND = Field('NANO_OF_SECOND', 'NanoOfSecond', NANOS, SECONDS, R(0, nanos_per_second - 1))
NANO_OF_DAY = Field('NANO_OF_DAY', 'NanoOfDay', NANOS, DAYS, R(0, nanos_per_day - 1))
MICRO_OF_SECOND = Field('MICRO_OF_SECOND', 'MicroOfSecond', MICROS, SECONDS, R(0, 999999))
MILLI_OF_SECOND = Field('MILLI_OF_SECOND', 'MilliOfSecond', MILLIS, SECONDS, R(0, 999))
SECOND_OF_MINUTE = Field('SECOND_OF_MINUTE', 'SecondOfMinute', SECONDS, MINUTES, R(0, 59))
SECOND_OF_DAY = Field('SECOND_OF_DAY', 'SecondOfDay', SECONDS, DAYS, R(0, seconds_per_day - 1))
MINUTE_OF_HOUR = Field('MINUTE_OF_HOUR', 'MinuteOfHour', MINUTES, HOURS, R(0, 59))
MINUTE_OF_DAY = Field('MINUTE_OF_DAY', 'MinuteOfDay', MINUTES, DAYS, R(0, (24 * 60) - 1))
HOUR_OF_DAY = Field('HOUR_OF_DAY', 'HourOfDay', HOURS, DAYS, R(0, 23))

DAY_OF_WEEK = Field('DAY_OF_WEEK', 'DayOfWeek', DAYS, WEEKS, R(1, 7))
DAY_OF_MONTH = Field('DAY_OF_MONTH', 'DayOfMonth', DAYS, MONTHS, R(1, 28, 31))
DAY_OF_YEAR = Field('DAY_OF_YEAR', 'DayOfYear', DAYS, YEARS, R(1, 365, 366))
EPOCH_DAY = Field('EPOCH_DAY', 'EpochDay', DAYS, FOREVER, R(-365243219162, 365241780471))
MONTH_OF_YEAR = Field('MONTH_OF_YEAR', 'MonthOfYear', MONTHS, YEARS, R(1, 12))
PROLEPTIC_MONTH = Field('PROLEPTIC_MONTH', 'ProlepticMonth', MONTHS, FOREVER, R(min_year * 12, (max_year * 12) + 11))
YEAR = Field('YEAR', 'Year', YEARS, FOREVER, R(min_year, max_year))

INSTANT_SECONDS = Field('INSTANT_SECONDS', 'InstantSeconds', SECONDS, FOREVER, R(-(2**63), (2**63) - 1))
OFFSET_SECONDS = Field('OFFSET_SECONDS', 'OffsetSeconds', SECONDS, FOREVER, R(-18 * 3600, 18 * 3600))

del R

time_fields = (
	NANO_OF_SECOND, NANO_OF_DAY, MICRO_OF_SECOND, MILLI_OF_SECOND,
	SECOND_OF_MINUTE, SECOND_OF_DAY, MINUTE_OF_HOUR, MINUTE_OF_DAY,
	HOUR_OF_DAY,
)

date_fields = (
	DAY_OF_WEEK, DAY_OF_MONTH, DAY_OF_YEAR, EPOCH_DAY,
	MONTH_OF_YEAR, PROLEPTIC_MONTH, YEAR,
)

fields = time_fields + date_fields + (INSTANT_SECONDS, OFFSET_SECONDS)
