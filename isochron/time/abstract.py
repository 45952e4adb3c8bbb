"""
# Abstract base classes for fields, units, temporal values and zone rules.

# Primarily, this module exists to document the interfaces that allow derived
# fields to participate in the operations of date and time values without the
# values knowing about them. Temporal values answer their primitive fields
# directly and dispatch any other field to the field itself:

#!syntax/python
	def select(self, field):
		if isinstance(field, standard.Field):
			...
		return field.select(self)

# The redundant method declarations are intentional.
"""
from abc import abstractmethod
import typing

class Unit(typing.Protocol):
	"""
	# A unit of time; an increment that can be added to a temporal value.
	"""

	@property
	@abstractmethod
	def name(self) -> str:
		"""
		# Display name of the unit.
		"""

	@property
	@abstractmethod
	def duration(self):
		"""
		# The duration of the unit in seconds. Used to order units; it is only
		# exact when &estimated is &False.
		"""

	@property
	@abstractmethod
	def estimated(self) -> bool:
		"""
		# Whether the &duration is an estimate of a length that varies.
		"""

	@abstractmethod
	def supported(self, temporal) -> bool:
		"""
		# Whether the unit can be added to the &temporal.
		"""

	@abstractmethod
	def elapse(self, temporal, amount:int):
		"""
		# Return a new temporal that is &amount units after &temporal.
		"""

	@abstractmethod
	def measure(self, start, end) -> int:
		"""
		# The number of complete units between &start and &end.
		"""

class Field(typing.Protocol):
	"""
	# A field of date-time; a quantity that can be selected from a temporal value.
	"""

	@property
	@abstractmethod
	def name(self) -> str:
		"""
		# Display name of the field.
		"""

	@property
	@abstractmethod
	def base_unit(self) -> Unit:
		"""
		# The unit that one increment of the field corresponds to.
		"""

	@property
	@abstractmethod
	def range_unit(self) -> Unit:
		"""
		# The unit over which the field's values are bound.
		"""

	@property
	@abstractmethod
	def range(self):
		"""
		# The &ranges.ValueRange of the field independent of any value.
		"""

	@abstractmethod
	def supported(self, temporal) -> bool:
		"""
		# Whether the field can be selected from &temporal.
		"""

	@abstractmethod
	def range_of(self, temporal):
		"""
		# The range of valid values of the field in the context of &temporal.
		"""

	@abstractmethod
	def select(self, temporal) -> int:
		"""
		# Extract the value of the field from &temporal.
		"""

	@abstractmethod
	def update(self, temporal, value:int):
		"""
		# Return a new temporal with the field set to &value.
		"""

	@abstractmethod
	def resolve(self, builder, value:int) -> bool:
		"""
		# Combine the field values present in &builder into more primitive fields.

		# Returns &True when the &builder was changed.
		"""

class Accessor(typing.Protocol):
	"""
	# Read-only access to the fields of a date-time value.
	"""

	@property
	@abstractmethod
	def chronology(self):
		"""
		# The calendar system the value is bound to.
		"""

	@abstractmethod
	def supports(self, field:Field) -> bool:
		"""
		# Whether &field can be selected from the value.
		"""

	@abstractmethod
	def range(self, field:Field):
		"""
		# The valid values of &field in the context of this value.
		"""

	@abstractmethod
	def select(self, field:Field) -> int:
		"""
		# The value of the &field.
		"""

class Temporal(Accessor):
	"""
	# A date-time value that can be adjusted.
	"""

	@abstractmethod
	def supports_unit(self, unit:Unit) -> bool:
		"""
		# Whether &unit can be added to the value.
		"""

	@abstractmethod
	def update(self, field:Field, value:int):
		"""
		# Construct and return a new instance with the &field set to &value.
		"""

	@abstractmethod
	def elapse(self, amount:int, unit:Unit):
		"""
		# The value &amount units after this one.
		"""

	@abstractmethod
	def rollback(self, amount:int, unit:Unit):
		"""
		# The value &amount units before this one.

		#!syntax/python
			assert t == t.rollback(n, unit).elapse(n, unit)
		"""

	@abstractmethod
	def measure(self, end, unit:Unit) -> int:
		"""
		# The number of complete units between the value and &end.
		"""

class Chronology(typing.Protocol):
	"""
	# A calendar system. The engine only requires the construction of local
	# date-times and leap year identification.
	"""

	@property
	@abstractmethod
	def identifier(self) -> str:
		pass

	@abstractmethod
	def is_leap_year(self, year:int) -> bool:
		pass

	@abstractmethod
	def datetime_from_epoch_second(self, second:int, nano:int, offset):
		"""
		# The local date-time of the instant identified by &second and &nano
		# observed at the &offset.
		"""

class Rules(typing.Protocol):
	"""
	# The offset rules of a zone.
	"""

	@abstractmethod
	def offset_at(self, instant):
		"""
		# The offset in effect at the &instant. Instants are never ambiguous.
		"""

	@abstractmethod
	def transition_at(self, local):
		"""
		# The transition whose gap or overlap contains the &local date-time,
		# or &None when the local date-time has a single offset.
		"""

	@abstractmethod
	def valid_offsets(self, local) -> typing.Sequence:
		"""
		# The offsets valid at the &local date-time. Empty in a gap, two in an overlap
		# ordered by their occurrence.
		"""

class Zone(typing.Protocol):
	"""
	# A time-zone; either a fixed offset or a region with rules.
	"""

	@property
	@abstractmethod
	def identifier(self) -> str:
		pass

	@property
	@abstractmethod
	def rules(self) -> Rules:
		pass
