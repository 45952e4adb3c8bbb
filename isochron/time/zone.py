"""
# Offsets, transitions and the offset rules of time-zones.

# A zone is either a fixed &Offset or a &Region identified by name. Both expose
# their &Rules; the rules of an offset always answer the offset itself.

# [ Elements ]
# /UTC/
	# The zero offset.
"""
import bisect
import functools
from . import errors
from . import abstract
from . import tzif
from . import posix
from .standard import OFFSET_SECONDS
from . import points
from . import chronology as chronologies

class Offset(tuple):
	"""
	# A fixed displacement from UTC in seconds: `(seconds,)`.

	# Offsets are ordered by their total seconds and are also usable as zones.
	"""
	__slots__ = ()

	@classmethod
	def from_seconds(Class, seconds):
		"""
		# Construct the offset of &seconds; `-18:00` to `+18:00`.
		"""
		OFFSET_SECONDS.validate(seconds)
		return Class((seconds,))

	@classmethod
	def of(Class, hours=0, minutes=0, seconds=0):
		return Class.from_seconds((hours * 3600) + (minutes * 60) + seconds)

	@property
	def seconds(self):
		return self[0]

	@property
	def identifier(self):
		return str(self)

	@property
	def rules(self):
		return Rules.fixed(self)

	def __int__(self):
		return self[0]

	def __str__(self):
		if self[0] == 0:
			return 'Z'

		sign = '-' if self[0] < 0 else '+'
		hours, seconds = divmod(abs(self[0]), 3600)
		minutes, seconds = divmod(seconds, 60)

		s = '%s%02d:%02d' %(sign, hours, minutes)
		if seconds:
			s += ':%02d' %(seconds,)
		return s

	def __repr__(self):
		return "(time.offset@'%s')" %(str(self),)

abstract.Zone.register(Offset)
UTC = Offset((0,))

class Transition(tuple):
	"""
	# A change of offset at an instant: `(epoch_second, before, after)`.

	# A transition to a greater offset is a gap: the local date-times between
	# &local_before and &local_after never occur. A transition to a lesser offset
	# is an overlap: the same local date-times occur twice.
	"""
	__slots__ = ()

	@property
	def epoch_second(self):
		return self[0]

	@property
	def before(self):
		return self[1]

	@property
	def after(self):
		return self[2]

	@property
	def instant(self):
		return points.Instant((self[0], 0))

	@property
	def duration(self):
		"""
		# Seconds of the jump; positive for gaps, negative for overlaps.
		"""
		return int(self[2]) - int(self[1])

	@property
	def is_gap(self):
		return int(self[2]) > int(self[1])

	@property
	def is_overlap(self):
		return int(self[2]) < int(self[1])

	@property
	def local_before(self):
		"""
		# The local date-time of the transition observed with the offset before it.
		"""
		return chronologies.ISO.datetime_from_epoch_second(self[0], 0, self[1])

	@property
	def local_after(self):
		return chronologies.ISO.datetime_from_epoch_second(self[0], 0, self[2])

	@property
	def valid_offsets(self):
		"""
		# The offsets valid inside the transition; none for a gap.
		"""
		if self.is_gap:
			return ()
		return (self[1], self[2])

	def __repr__(self):
		return '<%s %s at %s: %s to %s>' %(
			self.__class__.__name__,
			'Gap' if self.is_gap else 'Overlap',
			str(self.instant), str(self[1]), str(self[2]),
		)

def windows(transitions):
	"""
	# The local seconds, observed as if at UTC, where each transition's gap or
	# overlap begins.
	"""
	return [x[0] + min(int(x[1]), int(x[2])) for x in transitions]

@functools.lru_cache(maxsize=256)
def extended_transitions(extension, year):
	"""
	# The &Transition instances of the &posix.TZ &extension in &year.
	"""
	return tuple(
		Transition((second, Offset.from_seconds(before), Offset.from_seconds(after)))
		for second, before, after in extension.changes(year)
	)

class Rules(object):
	"""
	# The offsets of a zone as an initial offset followed by ordered transitions.

	# [ Properties ]
	# /initial/
		# The offset in effect before the first transition.
	# /transitions/
		# The sequence of &Transition instances ordered by their instant.
	# /name/
		# Identifier of the source of the rules.
	# /footer/
		# The POSIX TZ string describing offsets after the last transition, if any.
	# /extension/
		# The &posix.TZ parsed from &footer; its yearly changes are expanded on
		# demand for the instants and local date-times after the last transition.
	"""
	__slots__ = ('initial', 'transitions', 'name', 'footer', 'extension', 'seconds', 'windows')

	def __init__(self, initial, transitions, name=None, footer=None):
		self.initial = initial
		self.transitions = tuple(transitions)
		self.name = name
		self.footer = footer
		self.extension = posix.parse(footer) if footer else None

		self.seconds = [x[0] for x in self.transitions]
		self.windows = windows(self.transitions)

	def __repr__(self):
		return '<%s %s[%d]>' %(self.__class__.__name__, self.name, len(self.transitions))

	def __reduce__(self):
		return (self.__class__, (self.initial, self.transitions, self.name, self.footer))

	@classmethod
	def from_changes(Class, initial, changes, name=None, footer=None):
		"""
		# Construct from `(epoch_second, offset)` pairs; a change to the offset
		# already in effect is ignored.
		"""
		transitions = []
		current = initial
		for second, offset in sorted(changes):
			if offset == current:
				continue
			transitions.append(Transition((second, current, offset)))
			current = offset
		return Class(initial, transitions, name=name, footer=footer)

	@classmethod
	def fixed(Class, offset):
		return Class(offset, (), name=str(offset))

	@property
	def fixed_offset(self):
		if self.extension is not None and self.extension.dst is not None:
			return False
		return not self.transitions

	def offset_at(self, instant, bisect=bisect.bisect_right):
		"""
		# The offset in effect at the &points.Instant.
		"""
		idx = bisect(self.seconds, instant[0]) - 1
		if self.extension is not None and idx == len(self.transitions) - 1:
			return Offset.from_seconds(self.extension.offset_at(instant[0]))
		if idx < 0:
			return self.initial
		return self.transitions[idx][2]

	def extended(self, year):
		"""
		# The transitions of the &extension for the years around &year that
		# follow the last listed transition.
		"""
		last = self.seconds[-1] if self.seconds else None
		return [
			t for y in (year - 1, year, year + 1)
			for t in extended_transitions(self.extension, y)
			if last is None or t[0] > last
		]

	def _locate(self, local, bisect=bisect.bisect_right):
		# Returns the local seconds, the transition whose window begins at or
		# before them, and the offset in effect when there is no such transition.
		s = local.to_epoch_second(0)
		idx = bisect(self.windows, s) - 1

		if self.extension is None or idx < len(self.transitions) - 1:
			if idx < 0:
				return s, None, self.initial
			return s, self.transitions[idx], None

		last = self.transitions[idx] if idx >= 0 else None
		if last is not None and s < last[0] + max(int(last[1]), int(last[2])):
			return s, last, None

		derived = self.extended(local.year)
		i = bisect(windows(derived), s) - 1
		if i >= 0:
			return s, derived[i], None
		if last is not None:
			return s, last, None
		if derived:
			return s, None, derived[0][1]
		return s, None, Offset.from_seconds(self.extension.std)

	def transition_at(self, local):
		"""
		# The transition whose gap or overlap contains &local, or &None.
		"""
		s, t, previous = self._locate(local)
		if t is not None and s < t[0] + max(int(t[1]), int(t[2])):
			return t
		return None

	def valid_offsets(self, local):
		"""
		# The offsets valid at &local; one outside transitions, none in a gap,
		# and `(before, after)` in an overlap.
		"""
		s, t, previous = self._locate(local)
		if t is None:
			return (previous,)
		if s < t[0] + max(int(t[1]), int(t[2])):
			return t.valid_offsets
		return (t[2],)

abstract.Rules.register(Rules)

class Region(object):
	"""
	# A named zone with &Rules.
	"""
	__slots__ = ('identifier', 'rules')

	def __init__(self, identifier, rules):
		self.identifier = identifier
		self.rules = rules

	def __repr__(self):
		return '<%s %s>' %(self.__class__.__name__, self.identifier)

	def __str__(self):
		return self.identifier

	def __reduce__(self):
		return (self.__class__, (self.identifier, self.rules))

	def __eq__(self, ob):
		return isinstance(ob, Region) and self.identifier == ob.identifier

	def __ne__(self, ob):
		return not self.__eq__(ob)

	def __hash__(self):
		return hash(self.identifier)

	@classmethod
	def from_changes(Class, identifier, initial, changes):
		return Class(identifier, Rules.from_changes(initial, changes, name=identifier))

	@classmethod
	def from_file(Class, path, identifier):
		with open(path, 'rb') as f:
			data = f.read()
		return Class(identifier, tzif.rules_from_data(data, name=identifier))

	@classmethod
	def open(Class, name=None, directory=None):
		"""
		# Load the zone &name from the zoneinfo directory.

		# When &name is &None, the `TZ` environment variable is consulted and
		# `/etc/localtime` is used when it is not set.
		"""
		if name is None:
			name = tzif.environment_zone()

		if not name:
			path = tzif.tzdefault
			name = tzif.identify(path)
		else:
			path = tzif.system_timezone_file(name, directory)

		try:
			return Class.from_file(path, name)
		except OSError as err:
			raise errors.RulesError("unknown zone: " + repr(name)) from err

abstract.Zone.register(Region)
