"""
# Read TZif, time zone information, files (zic output) into &zone.Rules.

# Versions 1, 2 and 3 are supported. When present, the 64-bit data block of
# version 2 and later files is used, and the POSIX TZ footer is passed on to
# &zone.Rules where it describes the offsets after the last transition.

# [ Configuration ]
# /`TZ`/
	# Name of the default zone; a leading colon is ignored.
# /`TZDIR`/
	# The zoneinfo directory; defaults to &tzdir.
"""
import os
import os.path
import struct
import collections
from . import errors

magic = b'TZif'
tzdir = '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'
tzenviron = 'TZ'
tzdirenviron = 'TZDIR'

header_fields = (
	'tzh_ttisutcnt',   # The number of UT/local indicators stored in the file.
	'tzh_ttisstdcnt',  # The number of standard/wall indicators stored in the file.
	'tzh_leapcnt',     # The number of leap seconds for which data is stored in the file.
	'tzh_timecnt',     # The number of transition times for which data is stored in the file.
	'tzh_typecnt',     # The number of local time types for which data is stored in the file.
	'tzh_charcnt',     # The number of characters of time zone abbreviation strings.
)
tzinfo_header = collections.namedtuple('tzinfo_header', header_fields)

# magic, version, 15 reserved bytes and the counts.
header_struct = struct.Struct("!4sc15x" + (len(header_fields) * "l"))
ttinfo_struct = struct.Struct("!lbB")

transtime_struct_v1 = struct.Struct("!l")
leappairs_struct_v1 = struct.Struct("!ll")

transtime_struct_v2 = struct.Struct("!q")
leappairs_struct_v2 = struct.Struct("!ql")

#: A local time type of the file.
ttinfo = collections.namedtuple('ttinfo', (
	'offset',
	'isdst',
	'abbreviation',
	'isstd',
	'isut',
))

tzinfo = collections.namedtuple('tzinfo', (
	'version',
	'transitions',
	'types',
	'leaps',
	'footer',
))

def parse_header(data, position):
	if len(data) < position + header_struct.size:
		raise errors.RulesError("truncated TZif header")

	fields = header_struct.unpack_from(data, position)
	if fields[0] != magic:
		raise errors.RulesError("not a TZif file")

	return fields[1], tzinfo_header(*fields[2:])

def block_size(header, transtime, leappairs):
	return (
		(header.tzh_timecnt * transtime.size) +
		header.tzh_timecnt +
		(header.tzh_typecnt * ttinfo_struct.size) +
		header.tzh_charcnt +
		(header.tzh_leapcnt * leappairs.size) +
		header.tzh_ttisstdcnt +
		header.tzh_ttisutcnt
	)

def parse_block(data, position, header, transtime, leappairs):
	"""
	# Parse the data block following a header at &position.

	# Returns `(transitions, types, leaps)` where transitions is a sequence
	# of `(epoch_second, type_index)` pairs.
	"""
	if len(data) < position + block_size(header, transtime, leappairs):
		raise errors.RulesError("truncated TZif data block")

	end = position + (header.tzh_timecnt * transtime.size)
	transtimes = [
		transtime.unpack_from(data, x)[0]
		for x in range(position, end, transtime.size)
	]
	position = end

	# unsigned char's
	indexes = tuple(bytes(data[position:position + header.tzh_timecnt]))
	position += header.tzh_timecnt

	end = position + (header.tzh_typecnt * ttinfo_struct.size)
	timetypinfo = [
		ttinfo_struct.unpack_from(data, x)
		for x in range(position, end, ttinfo_struct.size)
	]
	position = end

	abbr = bytes(data[position:position + header.tzh_charcnt]) + b'\0'
	position += header.tzh_charcnt

	end = position + (header.tzh_leapcnt * leappairs.size)
	leaps = tuple([
		leappairs.unpack_from(data, x)
		for x in range(position, end, leappairs.size)
	])
	position = end

	isstd = tuple(bytes(data[position:position + header.tzh_ttisstdcnt]))
	position += header.tzh_ttisstdcnt

	isut = tuple(bytes(data[position:position + header.tzh_ttisutcnt]))
	position += header.tzh_ttisutcnt

	types = []
	for i, (offset, isdst, abbrind) in enumerate(timetypinfo):
		types.append(ttinfo(
			offset,
			bool(isdst),
			abbr[abbrind:abbr.find(b'\0', abbrind)].decode('ascii', 'replace'),
			bool(isstd[i]) if i < len(isstd) else False,
			bool(isut[i]) if i < len(isut) else False,
		))

	for i in indexes:
		if i >= len(types):
			raise errors.RulesError("transition refers to undefined local time type")

	return tuple(zip(transtimes, indexes)), tuple(types), leaps, position

def parse(data):
	"""
	# Given TZif data, identify the version and unpack the zone information.
	"""
	version, header = parse_header(data, 0)
	position = header_struct.size

	if version == b'\0':
		transitions, types, leaps, position = parse_block(
			data, position, header, transtime_struct_v1, leappairs_struct_v1
		)
		return tzinfo(1, transitions, types, leaps, None)

	# Skip the 32-bit block in favor of the 64-bit one.
	position += block_size(header, transtime_struct_v1, leappairs_struct_v1)
	version, header = parse_header(data, position)
	position += header_struct.size

	transitions, types, leaps, position = parse_block(
		data, position, header, transtime_struct_v2, leappairs_struct_v2
	)

	footer = None
	tail = bytes(data[position:])
	if tail.startswith(b'\n'):
		end = tail.find(b'\n', 1)
		if end != -1:
			footer = tail[1:end].decode('ascii') or None

	return tzinfo(int(version.decode('ascii')), transitions, types, leaps, footer)

def rules_from_data(data, name=None):
	"""
	# Construct &zone.Rules from the contents of a TZif file.
	"""
	from . import zone

	tz = parse(data)
	if not tz.types:
		raise errors.RulesError("TZif file has no local time types")

	offsets = [zone.Offset.from_seconds(x.offset) for x in tz.types]
	changes = [(second, offsets[i]) for second, i in tz.transitions]

	# The first local time type applies before the first transition.
	return zone.Rules.from_changes(offsets[0], changes, name=name, footer=tz.footer)

def environment_zone():
	"""
	# The zone named by the `TZ` environment variable, or &None.
	"""
	name = os.environ.get(tzenviron)
	if name and name.startswith(':'):
		name = name[1:]
	return name or None

def directory():
	return os.environ.get(tzdirenviron) or tzdir

def system_timezone_file(name, tzdir=None, _join=os.path.join):
	"""
	# The path of the zone &name in &tzdir or the configured &directory.
	"""
	if os.path.isabs(name) or '..' in name.split('/'):
		raise errors.RulesError("invalid zone name: " + repr(name))
	return _join(tzdir or directory(), name)

def identify(path):
	"""
	# The zone name of a zoneinfo link such as `/etc/localtime`.
	"""
	real = os.path.realpath(path)
	marker = '/zoneinfo/'
	if marker in real:
		return real[real.index(marker) + len(marker):]
	return os.path.basename(path)
