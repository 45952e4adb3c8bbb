"""
# Exception hierarchy for date-time resolution and field access.

# All failures are raised synchronously at the point of the offending operation.
# No instance is ever partially constructed before an exception is raised as all
# of the value types are immutable.
"""

class Error(Exception):
	"""
	# Base class for date-time calculation errors.
	"""

class UnsupportedFieldError(Error):
	"""
	# A field or unit was used with a value that does not expose the capabilities
	# the field or unit requires.
	"""

	def __init__(self, field, subject=None):
		self.field = field
		self.subject = subject
		super().__init__(field, subject)

	def __str__(self):
		if self.subject is None:
			return "unsupported field: " + str(self.field)
		return "unsupported field: %s (%s)" %(self.field, self.subject.__class__.__name__)

class RangeError(Error, ValueError):
	"""
	# A field value was outside of its valid range; including ranges
	# narrowed by the context of the value being changed.
	"""

	def __init__(self, field, value, range):
		self.field = field
		self.value = value
		self.range = range
		super().__init__(field, value, range)

	def __str__(self):
		return "invalid value for %s (valid values %s): %r" %(self.field, self.range, self.value)

class RulesError(Error):
	"""
	# The zone rules produced an inconsistent answer; no offset for a local
	# date-time or instant, or a gap without a transition.
	"""

class ChronologyError(Error):
	"""
	# An operation combined values bound to different chronologies.
	"""

class IncompatibleTypes(Error):
	"""
	# An operation was given a value of a type it cannot be combined with.
	"""

class ResolutionError(Error):
	"""
	# Partial field values could not be combined into a date or date-time.
	"""
