"""
# Zone resolution and zoned date-times.

# A local date-time is ambiguous with respect to a zone: it may fall inside
# a gap, where it never occurs, or an overlap, where it occurs twice.
# &resolve_best chooses exactly one offset for it. Instants are never ambiguous
# and are resolved by &resolve_instant.

#!syntax/python
	zdt = ZonedDateTime.of_best(local, region)
	assert zdt.earlier_offset_at_overlap().later_offset_at_overlap().offset == zdt.later_offset_at_overlap().offset
"""
from . import errors
from . import abstract
from . import points
from . import chronology as chronologies
from . import zone as zones
from .standard import (
	Field, Unit,
	SECONDS, FOREVER,
	INSTANT_SECONDS, OFFSET_SECONDS,
	nanos_per_second,
)

def resolve_best(local, zone, preferred=None):
	"""
	# Select the offset of &local in &zone.

	# Returns `(local, offset)`. The local date-time is only changed when it
	# falls in a gap; it is then moved forward by the length of the gap and
	# the offset after the transition is used. In an overlap, &preferred is
	# used when it is one of the valid offsets, otherwise the earlier offset.
	"""
	if isinstance(zone, zones.Offset):
		return (local, zone)

	rules = zone.rules
	valid = rules.valid_offsets(local)

	if len(valid) == 1:
		offset = valid[0]
	elif not valid:
		t = rules.transition_at(local)
		if t is None:
			raise errors.RulesError("no transition for local date-time in gap: " + str(local))
		local = local.plus_nanos(t.duration * nanos_per_second)
		offset = t.after
	elif preferred is not None and preferred in valid:
		offset = preferred
	else:
		offset = valid[0]

	if offset is None:
		raise errors.RulesError("zone rules produced no offset for " + str(local))
	return (local, offset)

def resolve_instant(chronology, instant, zone):
	"""
	# Construct the &ZonedDateTime of &instant in &zone.
	"""
	offset = zone.rules.offset_at(instant)
	if offset is None:
		raise errors.RulesError("zone rules produced no offset for " + str(instant))

	local = chronology.datetime_from_epoch_second(instant[0], instant[1], offset)
	return ZonedDateTime((local, offset, zone))

def rotl32(x, n):
	x &= 0xFFFFFFFF
	return ((x << n) | (x >> (32 - n))) & 0xFFFFFFFF

def restore(local, offset, zone):
	"""
	# Reconstruct a serialized &ZonedDateTime.

	# The stored offset is only a preference; the rules of the zone are
	# consulted again as they may have changed since the value was written.
	"""
	return ZonedDateTime.of_best(local, zone, offset)

class ZonedDateTime(tuple):
	"""
	# A local date-time with the offset and zone that qualify it: `(local, offset, zone)`.

	# The offset is valid for the zone when the value is constructed; afterwards
	# it is trusted. Ordering and equality are defined by the instant first,
	# then the local date-time, the zone identifier and the chronology.
	"""
	__slots__ = ()

	@classmethod
	def of_best(Class, local, zone, preferred=None):
		"""
		# Construct the zoned date-time of &local in &zone; see &resolve_best.
		"""
		local, offset = resolve_best(local, zone, preferred)
		return Class((local, offset, zone))

	@classmethod
	def of_instant(Class, instant, zone, chronology=None):
		return resolve_instant(chronology or chronologies.ISO, instant, zone)

	@property
	def local(self):
		return self[0]

	@property
	def offset(self):
		return self[1]

	@property
	def zone(self):
		return self[2]

	@property
	def chronology(self):
		return self[0].chronology

	@property
	def date(self):
		return self[0].date

	@property
	def epoch_second(self):
		return self[0].to_epoch_second(self[1])

	@property
	def nano(self):
		return self[0].nano

	@property
	def instant(self):
		return points.Instant((self.epoch_second, self[0].nano))

	def earlier_offset_at_overlap(self):
		"""
		# The same local date-time with the offset before the transition when
		# inside an overlap; otherwise this value.
		"""
		t = self[2].rules.transition_at(self[0])
		if t is not None and t.is_overlap:
			earlier = t.before
			if earlier != self[1]:
				return self.__class__((self[0], earlier, self[2]))
		return self

	def later_offset_at_overlap(self):
		"""
		# The same local date-time with the offset after the transition when
		# inside an overlap; otherwise this value.
		"""
		t = self[2].rules.transition_at(self[0])
		if t is not None and t.is_overlap:
			later = t.after
			if later != self[1]:
				return self.__class__((self[0], later, self[2]))
		return self

	def with_zone_same_local(self, zone):
		"""
		# Keep the local date-time and resolve it in &zone preferring the current offset.
		"""
		return self.of_best(self[0], zone, self[1])

	def with_zone_same_instant(self, zone):
		"""
		# Keep the instant and derive the local date-time of &zone.
		"""
		if zone == self[2]:
			return self
		return resolve_instant(self.chronology, self.instant, zone)

	def supports(self, field):
		if isinstance(field, Field):
			return True
		return field is not None and field.supported(self)

	def supports_unit(self, unit):
		if isinstance(unit, Unit):
			return unit is not FOREVER
		return unit is not None and unit.supported(self)

	def range(self, field):
		if isinstance(field, Field):
			if field is INSTANT_SECONDS or field is OFFSET_SECONDS:
				return field.range
			return self[0].range(field)
		return field.range_of(self)

	def select(self, field):
		if isinstance(field, Field):
			if field is INSTANT_SECONDS:
				return self.epoch_second
			elif field is OFFSET_SECONDS:
				return int(self[1])
			return self[0].select(field)
		return field.select(self)

	def _check(self, result):
		if result.chronology != self.chronology:
			raise errors.ChronologyError(
				"chronology mismatch, expected %s, actual %s" %(self.chronology, result.chronology)
			)
		return result

	def update(self, field, value):
		"""
		# Construct and return a new instance with the &field set to &value.

		# Setting &OFFSET_SECONDS resolves the instant of the local date-time at
		# the requested offset; the offset of the result is the zone's.
		"""
		if isinstance(field, Field):
			if field is INSTANT_SECONDS:
				return self.elapse(value - self.epoch_second, SECONDS)
			elif field is OFFSET_SECONDS:
				offset = zones.Offset.from_seconds(value)
				return resolve_instant(self.chronology, self[0].to_instant(offset), self[2])
			return self.of_best(self[0].update(field, value), self[2], self[1])
		return self._check(field.update(self, value))

	def elapse(self, amount, unit):
		if isinstance(unit, Unit):
			return self.of_best(self[0].elapse(amount, unit), self[2], self[1])
		return self._check(unit.elapse(self, amount))

	def rollback(self, amount, unit):
		return self.elapse(-amount, unit)

	def measure(self, end, unit):
		"""
		# The number of complete &unit between this value and &end.

		# &end is first moved to the offset of this value so that the local
		# date-times are compared at a common offset.
		"""
		if not isinstance(end, ZonedDateTime):
			raise errors.IncompatibleTypes("cannot measure %s to %s" %(
				self.__class__.__name__, end.__class__.__name__))
		if end.chronology != self.chronology:
			raise errors.ChronologyError("cannot measure between different chronologies")

		if isinstance(unit, Unit):
			end = end.with_zone_same_instant(self[1])
			return self[0].measure(end[0], unit)
		return unit.measure(self, end)

	def leads(self, ob):
		return self.instant < ob.instant

	def follows(self, ob):
		return self.instant > ob.instant

	def key(self):
		"""
		# The ordering key of the value.
		"""
		return (
			self.epoch_second, self[0].nano, self[0],
			self[2].identifier, self.chronology.identifier,
		)

	def __eq__(self, ob):
		if not isinstance(ob, ZonedDateTime):
			return NotImplemented
		return self.key() == ob.key()

	def __ne__(self, ob):
		if not isinstance(ob, ZonedDateTime):
			return NotImplemented
		return self.key() != ob.key()

	def __lt__(self, ob):
		if not isinstance(ob, ZonedDateTime):
			return NotImplemented
		return self.key() < ob.key()

	def __le__(self, ob):
		if not isinstance(ob, ZonedDateTime):
			return NotImplemented
		return self.key() <= ob.key()

	def __gt__(self, ob):
		if not isinstance(ob, ZonedDateTime):
			return NotImplemented
		return self.key() > ob.key()

	def __ge__(self, ob):
		if not isinstance(ob, ZonedDateTime):
			return NotImplemented
		return self.key() >= ob.key()

	def __hash__(self):
		return hash(self[0]) ^ hash(self[1]) ^ rotl32(hash(self[2]), 3)

	def __str__(self):
		s = str(self[0]) + str(self[1])
		if self[1] != self[2]:
			s += '[' + str(self[2].identifier) + ']'
		return s

	def __repr__(self):
		return "(time.zoned@'%s')" %(str(self),)

	def __reduce__(self):
		return (restore, (self[0], self[1], self[2]))

	def __setstate__(self, state):
		raise TypeError("zoned date-times are only restored by resolving the local date-time")

abstract.Temporal.register(ZonedDateTime)
