"""
# Inclusive value ranges used to validate field values.

# A &ValueRange has a fixed minimum and a possibly variable maximum: the
# days of the month range over `1 - 28/31`, weeks of a week-based-year over
# `1 - 52/53`.
"""
from . import errors

class ValueRange(tuple):
	"""
	# Inclusive range of the form `(minimum, largest_minimum, smallest_maximum, maximum)`.

	# The largest minimum and smallest maximum identify the variation of the range.
	# Fixed ranges have `minimum == largest_minimum` and `smallest_maximum == maximum`.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, minimum, maximum, variable=None):
		"""
		# Construct a range whose minimum is fixed.

		# When &variable is given, &maximum is the smallest maximum and &variable
		# is the largest:

		#!syntax/python
			days = ValueRange.of(1, 28, 31)
		"""
		if variable is None:
			smallest, maximum = maximum, maximum
		else:
			smallest, maximum = maximum, variable

		if minimum > smallest or smallest > maximum:
			raise ValueError("range boundaries out of order: %r, %r, %r" %(minimum, smallest, maximum))

		return Class((minimum, minimum, smallest, maximum))

	@property
	def minimum(self):
		return self[0]

	@property
	def largest_minimum(self):
		return self[1]

	@property
	def smallest_maximum(self):
		return self[2]

	@property
	def maximum(self):
		return self[3]

	@property
	def fixed(self):
		"""
		# Whether the range has a single minimum and a single maximum.
		"""
		return self[0] == self[1] and self[2] == self[3]

	def __contains__(self, value):
		return self[0] <= value <= self[3]

	def validate(self, value, field):
		"""
		# Return &value if it is within the range, otherwise raise &errors.RangeError
		# identifying the &field.
		"""
		if not (self[0] <= value <= self[3]):
			raise errors.RangeError(field, value, self)
		return value

	def __str__(self):
		lower = str(self[0]) if self[0] == self[1] else '%d/%d' %(self[0], self[1])
		upper = str(self[3]) if self[2] == self[3] else '%d/%d' %(self[2], self[3])
		return lower + ' - ' + upper

	def __repr__(self):
		return '<%s(%s)>' %(self.__class__.__name__, str(self))
