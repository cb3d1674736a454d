import json,logging,warnings
import requests
from bs4 import BeautifulSoup,XMLParsedAsHTMLWarning
from urllib.parse import urlencode,quote
from .classes import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

wiki_API     = 'https://{lang}.wikipedia.org/w/api.php?'
wikidata_API = 'https://www.wikidata.org/w/api.php?'
rest_API     = 'https://wikimedia.org/api/rest_v1/metrics/'
quarry_API   = 'https://quarry.wmcloud.org/query/{query_id}/result/latest/0/json'
suggest_API  = 'https://suggestqueries.google.com/complete/search?'

def _isiter(obj):
	'''
	Returns True if the object is an iterable, excluding strings.
	'''
	if isinstance(obj,(str,bytes,dict)):
		return False
	return hasattr(obj,'__iter__')

def _string(val):
	'''Booleans become 'true'/'false', numbers become their string version, anything else is returned as is.'''
	if isinstance(val,bool):
		return str(val).lower()
	if isinstance(val,(int,float)):
		return str(val)
	return val

def _props(d):
	'''Joins list values with "|" the way the MediaWiki API expects them.'''
	props = {}
	for u,v in d.items():
		props[u] = str.join('|',[_string(vv) for vv in v]) if _isiter(v) else _string(v)
	return props

def _rget(url,config=DEFAULT_CONFIG):
	'''Performs the GET request and returns the body. HTTP errors are raised.'''
	headers = {'User-Agent':config.user_agent,'X-User-Agent':config.user_agent}
	r = requests.get(url,headers=headers,timeout=config.timeout)
	r.raise_for_status()
	return r.text

def fetch(url,config=DEFAULT_CONFIG):
	'''Fetches url with the transport configured in config (requests by default).'''
	logger.debug('GET %s',url)
	get = config.fetch if config.fetch is not None else _rget
	return get(url,config)

def _decode(text,fmt):
	if fmt == 'json':
		return json.loads(text)
	# XML responses are read with html.parser
	with warnings.catch_warnings():
		warnings.simplefilter('ignore',XMLParsedAsHTMLWarning)
		return BeautifulSoup(text,'html.parser')

def wp_q(d,lang='en',config=DEFAULT_CONFIG):
	"""
	Queries the Wikipedia action API provided a dictionary of parameters.
	Only a single request is done, continuation queries are not followed.

	Parameters
	----------
	d : dict
		Dictionary of parameters. List values are joined with '|'.
	lang : str (default='en')
		Language edition to query.
	config : Config
		Configuration of the call.

	Returns
	-------
	r : BeautifulSoup or dict
		Parsed XML tree (format=xml, the default) or the decoded json.

	Examples
	--------
	>>> r = wp_q({'list':'backlinks','bltitle':'Berlin','bllimit':'max'})
	>>> [bl['title'] for bl in r.find('backlinks').find_all('bl')]
	"""
	d = dict(d)
	d['action'] = 'query' if 'action' not in d else d['action']
	d['format'] = 'xml' if 'format' not in d else d['format']
	url = wiki_API.format(lang=lang)+urlencode(_props(d))
	return _decode(fetch(url,config),d['format'])

def wd_q(d,config=DEFAULT_CONFIG):
	"""
	Queries the Wikidata API provided a dictionary of parameters.

	Parameters
	----------
	d : dict
		Dictionary of parameters. List values are joined with '|'.
	config : Config
		Configuration of the call.

	Returns
	-------
	r : dict
		Dictionary with the result of the query.

	Examples
	--------
	>>> r = wd_q({'props':'labels','ids':'Q64','languages':['en','de']})
	>>> r['entities']['Q64']['labels']['de']['value']
	"""
	d = dict(d)
	d['action'] = 'wbgetentities' if 'action' not in d else d['action']
	d['format'] = 'json' if 'format' not in d else d['format']
	url = wikidata_API+urlencode(_props(d))
	return _decode(fetch(url,config),d['format'])

def rest_q(parts,config=DEFAULT_CONFIG):
	'''
	Queries the Wikimedia REST metrics API.
	parts are the path segments after /metrics/, each one is quoted.
	'''
	url = rest_API+str.join('/',[quote(_string(p),safe='') for p in parts])
	return json.loads(fetch(url,config))

def quarry_q(query_id,config=DEFAULT_CONFIG):
	'''Gets the latest result set of a Quarry query.'''
	url = quarry_API.format(query_id=quote(_string(query_id),safe=''))
	return json.loads(fetch(url,config))

def suggest_q(query,lang='en',config=DEFAULT_CONFIG):
	'''Gets the Google Suggest toolbar XML for query.'''
	url = suggest_API+urlencode({'output':'toolbar','hl':lang,'q':query})
	return _decode(fetch(url,config),'xml')
