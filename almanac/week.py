"""
# Week based measures of time: days of seven.
"""
#: English names of the days of the week.
weekday_names = (
	'sunday',
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
)

#: Total number of days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the English names of the days of the week.
weekday_abbreviations = tuple(x[:3] for x in weekday_names)

#: Map of weekday names and abbreviations to a zero-based index.
weekday_name_to_number = {
	weekday_names[i]: i
	for i in range(len(weekday_names))
}
weekday_name_to_number.update([
	(k[:3], v) for (k, v) in weekday_name_to_number.items()
])

# 1970-01-01 was a Thursday.
unix_epoch_weekday = 4

def day_of_week(unix_days:int, start:int=0) -> int:
	"""
	# Derive the day of week of the given day count relative to the Unix epoch.

	# [ Parameters ]
	# /unix_days/
		# Days since 1970-01-01.
	# /start/
		# The weekday that is considered the first of the week; defaults to Sunday.
	"""
	return (unix_days + unix_epoch_weekday - start) % days_in_week

def weekday_name(index:int, abbreviated:bool=False) -> str:
	if abbreviated:
		return weekday_abbreviations[index]
	return weekday_names[index]
