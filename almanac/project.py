name = 'almanac'
abstract = 'Civil dates, zoned instants, durations, periods, and intervals.'
icon = '📅'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
