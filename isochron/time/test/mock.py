"""
# Test support zones and TZif data.
"""
import struct
from .. import zone
from ..tzif import rules_from_data
from ..points import LocalDateTime

cet = zone.Offset.of(hours=1)
cest = zone.Offset.of(hours=2)

def utc_second(*fields):
	return LocalDateTime.of(*fields).to_epoch_second(0)

#: 2019-03-31T01:00Z; local 02:00 to 03:00 is skipped.
spring = utc_second(2019, 3, 31, 1)
#: 2019-10-27T01:00Z; local 02:00 to 03:00 repeats.
autumn = utc_second(2019, 10, 27, 1)

def central_europe(identifier='Test/Central'):
	"""
	# A region observing one year of European summer time.
	"""
	return zone.Region.from_changes(identifier, cet, [(spring, cest), (autumn, cet)])

class EmptyRules(object):
	'Rules that answer nothing'

	def offset_at(self, instant):
		return None

	def valid_offsets(self, local):
		return ()

	def transition_at(self, local):
		return None

def block(version, time_format, transitions, types, abbreviations):
	"""
	# Assemble a TZif header and data block. &transitions is a sequence of
	# `(epoch_second, type_index)` and &types a sequence of `(offset, isdst, abbreviation_index)`.
	"""
	counts = (len(types), len(types), 0, len(transitions), len(types), len(abbreviations))
	body = b''.join(struct.pack(time_format, t) for t, i in transitions)
	body += bytes(i for t, i in transitions)
	body += b''.join(struct.pack('!lbB', *x) for x in types)
	body += abbreviations
	body += bytes(len(types)) # isstd
	body += bytes(len(types)) # isut
	return struct.pack('!4sc15x6l', b'TZif', version, *counts) + body

def tzif(version, transitions, types, abbreviations, footer=None):
	"""
	# Assemble TZif data; the 64-bit block and footer are added for versions after 1.
	"""
	data = block(version, '!l', transitions, types, abbreviations)
	if version != b'\0':
		data += block(version, '!q', transitions, types, abbreviations)
		data += b'\n' + (footer or b'') + b'\n'
	return data

def central_europe_tzif(version=b'2'):
	return tzif(
		version,
		[(spring, 1), (autumn, 0)],
		[(3600, 0, 0), (7200, 1, 4)],
		b'CET\0CEST\0',
		footer=b'CET-1CEST,M3.5.0,M10.5.0/3',
	)

def footer_tzif(footer, offset, abbreviation):
	"""
	# TZif data with a single local time type and no transitions; every
	# offset change comes from the &footer.
	"""
	return tzif(b'2', [], [(offset, 0, 0)], abbreviation + b'\0', footer=footer)

def footer_region(identifier, footer, offset, abbreviation):
	rules = rules_from_data(footer_tzif(footer, offset, abbreviation), name=identifier)
	return zone.Region(identifier, rules)

def central_europe_footer(identifier='Test/Footer'):
	return footer_region(identifier, b'CET-1CEST,M3.5.0,M10.5.0/3', 3600, b'CET')

def new_york_footer(identifier='Test/Eastern'):
	return footer_region(identifier, b'EST5EDT,M3.2.0,M11.1.0', -18000, b'EST')
