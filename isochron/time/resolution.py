"""
# Resolution of partially specified dates from field values.

# A &Builder accumulates field values in any order and collapses combinations
# of them into an epoch-day. Derived fields consume their own combinations
# through &abstract.Field.resolve; the primitive combinations are merged by the
# builder itself.

#!syntax/python
	b = Builder()
	b.add(isofields.WEEK_BASED_YEAR, 2009)
	b.add(isofields.WEEK_OF_WEEK_BASED_YEAR, 1)
	b.add(standard.DAY_OF_WEEK, 1)
	assert str(b.resolve().date()) == '2008-12-29'
"""
from . import errors
from . import points
from . import chronology as chronologies
from .standard import (
	Field, nanos_per_second,
	EPOCH_DAY, YEAR, MONTH_OF_YEAR, DAY_OF_MONTH, DAY_OF_YEAR,
	NANO_OF_DAY, HOUR_OF_DAY, MINUTE_OF_HOUR, SECOND_OF_MINUTE, NANO_OF_SECOND,
)

#: Iterations allowed before &Builder.resolve stops offering fields.
default_limit = 100

class Builder(object):
	"""
	# A map of fields to candidate values used to resolve a date.

	# [ Properties ]
	# /chronology/
		# The calendar system used to construct dates.
	# /fields/
		# The field values that have not been consumed.
	# /iterations/
		# The number of passes performed by the last &resolve.
	"""

	def __init__(self, chronology=None):
		self.chronology = chronology or chronologies.ISO
		self.fields = {}
		self.iterations = 0

	def __repr__(self):
		return '<%s %r>' %(self.__class__.__name__, {str(k): v for k, v in self.fields.items()})

	def __contains__(self, field):
		return field in self.fields

	def __len__(self):
		return len(self.fields)

	def get(self, field, default=None):
		return self.fields.get(field, default)

	def add(self, field, value):
		"""
		# Record &value for &field. Raises &errors.ResolutionError when the field
		# already holds a different value.
		"""
		current = self.fields.get(field)
		if current is not None and current != value:
			raise errors.ResolutionError(
				"conflicting values for %s: %r and %r" %(field, current, value)
			)
		self.fields[field] = value
		return self

	def query(self, *fields):
		"""
		# The values of &fields in the given order, or &None when any is missing.
		"""
		try:
			return tuple(self.fields[x] for x in fields)
		except KeyError:
			return None

	def remove(self, *fields):
		for x in fields:
			self.fields.pop(x, None)

	def merge(self):
		"""
		# Combine the primitive date fields into &standard.EPOCH_DAY.
		"""
		ymd = self.query(YEAR, MONTH_OF_YEAR, DAY_OF_MONTH)
		if ymd is not None:
			d = self.chronology.date(*ymd)
			self.add(EPOCH_DAY, d.epoch_day)
			self.remove(YEAR, MONTH_OF_YEAR, DAY_OF_MONTH)
			return True

		yd = self.query(YEAR, DAY_OF_YEAR)
		if yd is not None:
			d = points.LocalDate.from_day_of_year(yd[0], yd[1], self.chronology)
			self.add(EPOCH_DAY, d.epoch_day)
			self.remove(YEAR, DAY_OF_YEAR)
			return True

		return False

	def step(self):
		"""
		# Offer every present derived field its resolution once.
		"""
		changed = False
		for field, value in list(self.fields.items()):
			if isinstance(field, Field) or field not in self.fields:
				# Primitive, or consumed earlier in this pass.
				continue
			if field.resolve(self, value):
				changed = True

		if self.merge():
			changed = True
		return changed

	def resolve(self, limit=default_limit):
		"""
		# Repeat &step until a pass changes nothing or &limit passes were made.
		"""
		self.iterations = 0
		while self.iterations < limit:
			self.iterations += 1
			if not self.step():
				break
		return self

	def date(self):
		"""
		# The &points.LocalDate of the resolved epoch-day.
		"""
		days = self.fields.get(EPOCH_DAY)
		if days is None:
			raise errors.ResolutionError("insufficient fields to identify a date: " + repr(self))
		return self.chronology.date_from_epoch_day(days)

	def nano_of_day(self):
		nod = self.fields.get(NANO_OF_DAY)
		if nod is not None:
			return NANO_OF_DAY.validate(nod)

		hour = self.fields.get(HOUR_OF_DAY, 0)
		minute = self.fields.get(MINUTE_OF_HOUR, 0)
		second = self.fields.get(SECOND_OF_MINUTE, 0)
		nano = self.fields.get(NANO_OF_SECOND, 0)
		return points.LocalDateTime.nano_of_day_of(hour, minute, second, nano)

	def datetime(self):
		"""
		# The &points.LocalDateTime of the resolved date and the time fields;
		# absent time fields are zero.
		"""
		return points.LocalDateTime((self.date(), self.nano_of_day()))

	def zoned(self, zone, preferred=None):
		return self.datetime().at_zone(zone, preferred)

def resolve(fields, chronology=None, limit=default_limit):
	"""
	# Resolve the (field, value) pairs of &fields into a &points.LocalDate.
	"""
	b = Builder(chronology)
	for field, value in fields:
		b.add(field, value)
	return b.resolve(limit).date()
