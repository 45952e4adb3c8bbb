"""
# Calendar systems.

# Only the proleptic ISO calendar is provided. The engine threads the chronology
# through its values so that operations combining values of different calendar
# systems fail rather than compare incompatible fields.
"""
from . import gregorian
from . import ranges
from . import standard
from . import points
from . import abstract

class Chronology(object):
	"""
	# A calendar system following the proleptic Gregorian rules.

	# Chronologies compare by their class and &identifier.
	"""
	__slots__ = ('identifier',)

	def __init__(self, identifier):
		self.identifier = identifier

	def __repr__(self):
		return '<%s %s>' %(self.__class__.__name__, self.identifier)

	def __str__(self):
		return self.identifier

	def __reduce__(self):
		return (self.__class__, (self.identifier,))

	def __eq__(self, ob):
		return self.__class__ is ob.__class__ and self.identifier == ob.identifier

	def __ne__(self, ob):
		return not self.__eq__(ob)

	def __lt__(self, ob):
		return self.identifier < ob.identifier

	def __hash__(self):
		return hash(self.identifier)

	def is_leap_year(self, year):
		return gregorian.year_is_leap(year)

	def validate(self, year, month, day):
		"""
		# Check the fields of a date raising &errors.RangeError when invalid.
		"""
		standard.YEAR.validate(year)
		standard.MONTH_OF_YEAR.validate(month)
		standard.DAY_OF_MONTH.range.validate(day, standard.DAY_OF_MONTH)
		if day > 28:
			length = gregorian.days_in_month(year, month)
			ranges.ValueRange.of(1, length).validate(day, standard.DAY_OF_MONTH)

	def date(self, year, month, day):
		return points.LocalDate.of(year, month, day, self)

	def date_from_epoch_day(self, days):
		standard.EPOCH_DAY.validate(days)
		return points.LocalDate(gregorian.date_from_epoch_day(days) + (self,))

	def datetime(self, year, month, day, hour=0, minute=0, second=0, nano=0):
		return points.LocalDateTime.of(year, month, day, hour, minute, second, nano, chronology=self)

	def datetime_from_epoch_second(self, second, nano, offset):
		"""
		# The local date-time of the instant identified by &second and &nano
		# observed at the &offset.
		"""
		local = second + int(offset)
		days, second_of_day = divmod(local, standard.seconds_per_day)
		return points.LocalDateTime((
			self.date_from_epoch_day(days),
			(second_of_day * standard.nanos_per_second) + nano,
		))

abstract.Chronology.register(Chronology)

class IsoChronology(Chronology):
	"""
	# The ISO-8601 calendar system.
	"""
	__slots__ = ()

	def __reduce__(self):
		return 'ISO'

#: The ISO chronology.
ISO = IsoChronology('ISO')
