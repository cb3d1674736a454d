import re,datetime as dt
from dateutil import parser as date_parser
from dateutil.tz import tzutc
from .classes import Locator

_point = re.compile(r'^[-+]?([1-8]?\d(\.\d+)?|90(\.0+)?),\s*[-+]?(180(\.0+)?|((1[0-7]\d)|([1-9]?\d))(\.\d+)?)$')
_qid   = re.compile(r'^Q\d+$')

def _split(raw):
	'''Splits on the first colon only, titles may contain colons themselves.'''
	language,_,subject = raw.partition(':')
	return language,subject

def parse_locator(raw,language='en'):
	'''
	Parses a locator of the form 'language:subject'.

	Parameters
	----------
	raw : str
		Locator to parse, e.g. 'de:Berlin' or 'Berlin'.
	language : str (default='en')
		Language used when raw has no colon.

	Returns
	-------
	locator : Locator or None
		None when raw or its subject is empty.

	Examples
	--------
	>>> parse_locator('en:Category:Berlin')
	en:Category:Berlin
	'''
	if not raw:
		return None
	raw = str(raw)
	if ':' in raw:
		language,subject = _split(raw)
	else:
		subject = raw
	if not subject:
		return None
	return Locator(language,subject)

def parse_category(raw,language='en'):
	'''
	Parses a category locator.
	Only splits off a language when there is more than one colon, 'Category:Berlin' keeps the default language.
	'''
	if not raw:
		return None
	raw = str(raw)
	if raw.count(':') > 1:
		language,subject = _split(raw)
	else:
		subject = raw
	if not subject:
		return None
	return Locator(language,subject)

def parse_point(subject):
	'''Returns the (lat,lon) strings of a 'lat,lon' subject or None if subject is not a point.'''
	if _point.match(subject) is None:
		return None
	lat,lon = subject.split(',')[:2]
	return lat.strip(),lon.strip()

def is_qid(value):
	'''Returns True if value looks like a Wikidata item id (Q42).'''
	return _qid.match(value) is not None

def unique_languages(langs):
	'''
	Deduplicates a list of language codes, keeping the first occurrence.
	A single code or None are accepted as well.
	'''
	if langs is None:
		return []
	if isinstance(langs,str):
		langs = [langs]
	out = []
	for lang in langs:
		if lang not in out:
			out.append(lang)
	return out

def underscore(title):
	return re.sub(r'\s','_',title)

def spaces(title):
	return title.replace('_',' ')

def _as_date(value):
	if isinstance(value,dt.datetime):
		return value.date()
	return value

def iso_date(value):
	'''Formats a date as yyyymmdd. Strings are assumed to be formatted already.'''
	if isinstance(value,str):
		return value
	d = _as_date(value)
	return str(d.year)+('00'+str(d.month))[-2:]+('00'+str(d.day))[-2:]

def iso_date_hour(value):
	'''Formats a date as yyyymmdd00, the hourly format of the aggregate endpoint.'''
	if isinstance(value,str):
		return value
	return iso_date(value)+'00'

def iso_datetime(value,time):
	'''Formats a date as yyyy-mm-dd followed by time (e.g. 'T00:00:00').'''
	if isinstance(value,str):
		return value
	d = _as_date(value)
	return d.isoformat()+time

def parse_rest_timestamp(timestamp):
	'''
	Parses the timestamps of the REST metrics API.
	Both yyyymmddhh (pageviews) and yyyymmdd (unique devices) are supported.
	'''
	if len(timestamp) == 10:
		d = dt.datetime.strptime(timestamp,'%Y%m%d%H')
	elif len(timestamp) == 8:
		d = dt.datetime.strptime(timestamp,'%Y%m%d')
	else:
		raise ValueError('Unrecognized timestamp '+timestamp)
	return d.replace(tzinfo=tzutc())

def parse_revision_timestamp(timestamp):
	'''Parses a revision timestamp (2016-01-31T12:00:00Z) into an aware UTC datetime.'''
	return date_parser.isoparse(timestamp).astimezone(tzutc())

def newest_first(rows):
	'''Sorts rows by their first column (a datetime), newest first.'''
	return sorted(rows,key=lambda row:row[0],reverse=True)
