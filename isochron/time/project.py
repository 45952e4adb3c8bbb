identity = 'http://isochron.dev/project/python/isochron.time'
name = 'isochron'
abstract = 'Zone aware date-time resolution and ISO-8601 derived calendar fields.'
icon = '⌛'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
