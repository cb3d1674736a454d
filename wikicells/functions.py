import datetime as dt,functools,logging
import requests
from dateutil.relativedelta import relativedelta
from .classes import Locator,Result,DEFAULT_CONFIG,NO_INPUT,NOT_FOUND,TRANSPORT_ERROR
from .query import wp_q,wd_q,rest_q,quarry_q,suggest_q,_isiter
from .parse_functions import parse_locator,parse_category,parse_point,is_qid,unique_languages,underscore,spaces
from .parse_functions import iso_date,iso_date_hour,iso_datetime,parse_rest_timestamp,parse_revision_timestamp,newest_first

logger = logging.getLogger(__name__)

FUNCTIONS = {}

def custom_function(name):
	'''
	Registers f as the spreadsheet function name and converts upstream failures into an empty Result.
	HTTP 404 gives NOT_FOUND, other transport errors give TRANSPORT_ERROR, payloads without the expected shape give NOT_FOUND.
	'''
	def decorator(f):
		@functools.wraps(f)
		def wrapper(*args,**kwargs):
			try:
				return f(*args,**kwargs)
			except requests.HTTPError as e:
				if e.response is not None and e.response.status_code == 404:
					logger.warning('%s: %s (%s)',name,NOT_FOUND,e)
					return Result.empty(NOT_FOUND)
				logger.warning('%s: %s (%s)',name,TRANSPORT_ERROR,e)
				return Result.empty(TRANSPORT_ERROR)
			except requests.RequestException as e:
				logger.warning('%s: %s (%s)',name,TRANSPORT_ERROR,e)
				return Result.empty(TRANSPORT_ERROR)
			except (KeyError,IndexError,AttributeError,TypeError,ValueError) as e:
				logger.warning('%s: %s (%s: %s)',name,NOT_FOUND,type(e).__name__,e)
				return Result.empty(NOT_FOUND)
		FUNCTIONS[name] = wrapper
		return wrapper
	return decorator

def _config(config):
	return DEFAULT_CONFIG if config is None else config

def _namespaces(namespaces,default='0'):
	return default if not namespaces else namespaces

def _today():
	return dt.date.today()

def _titles(entries):
	return [entry['title'] for entry in entries]

def _synonyms(loc,namespaces,config):
	r = wp_q({'blnamespace':_namespaces(namespaces),
				'list':'backlinks',
				'blfilterredir':'redirects',
				'bllimit':'max',
				'bltitle':underscore(loc.subject)},lang=loc.language,config=config)
	return _titles(r.find('backlinks').find_all('bl'))

def _inbound_links(loc,namespaces,config):
	r = wp_q({'list':'backlinks',
				'bllimit':'max',
				'blnamespace':_namespaces(namespaces),
				'bltitle':underscore(loc.subject)},lang=loc.language,config=config)
	return _titles(r.find('backlinks').find_all('bl'))

def _outbound_links(loc,namespaces,config):
	r = wp_q({'prop':'links',
				'plnamespace':_namespaces(namespaces),
				'pllimit':'max',
				'titles':underscore(loc.subject)},lang=loc.language,config=config)
	return _titles(r.find('links').find_all('pl'))

def _translations(loc,target_languages,config):
	'''
	Gets the language links of the article as a {lang:title} dictionary.
	Target languages are seeded with the source title, the source language is always present.
	'''
	targets = unique_languages(target_languages)
	results = {}
	for lang in targets:
		if lang:
			results[lang] = spaces(loc.subject)
	r = wp_q({'prop':'langlinks',
				'lllimit':'max',
				'titles':underscore(loc.subject)},lang=loc.language,config=config)
	page = r.find('page')
	if page is None or page.has_attr('missing'):
		raise KeyError(loc.subject)
	# pages without translations carry no <langlinks> element
	langlinks = page.find('langlinks')
	for ll in (langlinks.find_all('ll') if langlinks is not None else []):
		lang = ll['lang']
		if (len(targets)!=0)&(lang not in targets):
			continue
		results[lang] = ll.get_text()
	results[loc.language] = spaces(loc.subject)
	return results

@custom_function('WIKISYNONYMS')
def synonyms(article,namespaces=None,config=None):
	"""
	Gets the synonyms (redirects) of a Wikipedia article.

	Parameters
	----------
	article : str
		Article in the format 'language:Article_Title' ('de:Berlin').
	namespaces : str or list (optional)
		Only include pages in these namespaces, defaults to '0'.
	config : Config (optional)
		Configuration of the call.

	Returns
	-------
	synonyms : Result
		List of titles redirecting to the article.

	Examples
	--------
	>>> synonyms('en:Berlin')
	"""
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	return Result.ok(_synonyms(loc,namespaces,config))

@custom_function('WIKIARTICLESAROUND')
def articles_around(article_or_point,radius,include_distance=False,namespaces=None,config=None):
	"""
	Gets the Wikipedia articles around an article or around a point.

	Parameters
	----------
	article_or_point : str
		Article in the format 'language:Article_Title' ('de:Berlin')
		or point in the format 'language:lat,lon' ('en:37.786971,-122.399677').
	radius : int
		Search radius in meters.
	include_distance : boolean (False)
		If True every row ends with the distance to the center.
	namespaces : str or list (optional)
		Only include pages in these namespaces, defaults to '0'.

	Returns
	-------
	articles : Result
		Rows of [title, lat, lon] or [title, lat, lon, dist].
	"""
	config = _config(config)
	loc = parse_locator(article_or_point,config.language)
	if (loc is None)|(radius is None):
		return Result.empty(NO_INPUT)
	d = {'list':'geosearch','gslimit':'max','gsradius':radius}
	point = parse_point(loc.subject)
	if point is not None:
		d['gscoord'] = point[0]+'|'+point[1]
	else:
		d['gspage'] = underscore(loc.subject)
	d['gsnamespace'] = _namespaces(namespaces)
	r = wp_q(d,lang=loc.language,config=config)
	rows = []
	for gs in r.find('geosearch').find_all('gs'):
		row = [gs['title'],float(gs['lat']),float(gs['lon'])]
		if include_distance:
			row.append(float(gs['dist']))
		rows.append(row)
	return Result.ok(rows)

@custom_function('WIKITRANSLATE')
def translate(article,target_languages=None,skip_header=False,config=None):
	"""
	Gets the translations (language links) of a Wikipedia article.

	Parameters
	----------
	article : str
		Article in the format 'language:Article_Title' ('de:Berlin').
	target_languages : str or list (optional)
		Languages to limit the results to.
	skip_header : boolean (False)
		If True only the titles are returned, without the language column.

	Returns
	-------
	translations : Result
		Rows of [lang, title], or titles if skip_header.
	"""
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	translations = _translations(loc,target_languages,config)
	if skip_header:
		return Result.ok(list(translations.values()))
	return Result.ok([[lang,title] for lang,title in translations.items()])

@custom_function('WIKIEXPAND')
def expand(article,target_languages=None,config=None):
	"""
	Gets the translations of a Wikipedia article and the synonyms of every translation.

	Returns
	-------
	expansion : Result
		One row per language: [lang, translated title, synonym, synonym, ...].
	"""
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	rows = []
	for lang,title in _translations(loc,target_languages,config).items():
		rows.append([lang,title]+_synonyms(Locator(lang,title),None,config))
	return Result.ok(rows)

@custom_function('WIKICOMMONSLINK')
def commons_link(file_name,config=None):
	'''Gets the Wikimedia Commons url of a file given as 'language:File_Name' ('en:Flag of Berlin.svg').'''
	config = _config(config)
	loc = parse_locator(file_name,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	r = wp_q({'prop':'imageinfo',
				'iiprop':'url',
				'titles':'File:'+underscore(loc.subject)},lang=loc.language,config=config)
	return Result.ok([r.find('imageinfo').find('ii')['url']])

def _category_members(category,namespaces,default_namespace,config):
	config = _config(config)
	loc = parse_category(category,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	r = wp_q({'list':'categorymembers',
				'cmlimit':'max',
				'cmprop':'title',
				'cmtype':['subcat','page'],
				'cmnamespace':_namespaces(namespaces,default_namespace),
				'cmtitle':underscore(loc.subject)},lang=loc.language,config=config)
	return Result.ok(_titles(r.find('categorymembers').find_all('cm')))

@custom_function('WIKICATEGORYMEMBERS')
def category_members(category,namespaces=None,config=None):
	"""
	Gets the members of a Wikipedia category.

	Parameters
	----------
	category : str
		Category in the format 'language:Category:Title' ('en:Category:Visitor_attractions_in_Berlin').
		'Category:Title' uses the default language.
	namespaces : str or list (optional)
		Only include pages in these namespaces, defaults to '0' (articles).
	"""
	return _category_members(category,namespaces,'0',config)

@custom_function('WIKISUBCATEGORIES')
def subcategories(category,namespaces=None,config=None):
	'''Same as category_members, but the namespace defaults to '14' (categories).'''
	return _category_members(category,namespaces,'14',config)

@custom_function('WIKICATEGORIES')
def categories(article,config=None):
	'''Gets the categories of a Wikipedia article.'''
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	r = wp_q({'prop':'categories',
				'cllimit':'max',
				'titles':underscore(loc.subject)},lang=loc.language,config=config)
	return Result.ok(_titles(r.find('categories').find_all('cl')))

@custom_function('WIKIINBOUNDLINKS')
def inbound_links(article,namespaces=None,config=None):
	'''Gets the titles of the pages linking to the article.'''
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	return Result.ok(_inbound_links(loc,namespaces,config))

@custom_function('WIKIOUTBOUNDLINKS')
def outbound_links(article,namespaces=None,config=None):
	'''Gets the titles of the pages the article links to.'''
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	return Result.ok(_outbound_links(loc,namespaces,config))

@custom_function('WIKIMUTUALLINKS')
def mutual_links(article,namespaces=None,config=None):
	"""
	Gets the mutual links of a Wikipedia article.
	These are the pages that link to the article and are linked from it,
	in the order of the inbound links.
	"""
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	inbound  = _inbound_links(loc,namespaces,config)
	outbound = set(_outbound_links(loc,namespaces,config))
	return Result.ok([link for link in inbound if link in outbound])

@custom_function('WIKIGEOCOORDINATES')
def geocoordinates(article,config=None):
	'''Gets the primary coordinates of a Wikipedia article as [[lat, lon]].'''
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	r = wp_q({'prop':'coordinates',
				'colimit':'max',
				'coprimary':'primary',
				'titles':underscore(loc.subject)},lang=loc.language,config=config)
	co = r.find('coordinates').find('co')
	return Result.ok([[float(co['lat']),float(co['lon'])]])

@custom_function('WIKILINKSEARCH')
def link_search(link_pattern,protocol=None,namespaces=None,config=None):
	"""
	Gets the Wikipedia articles with an external link matching a pattern.

	Parameters
	----------
	link_pattern : str
		Pattern in the format 'language:example.com' or 'language:*.example.com'.
	protocol : str (optional)
		Protocol of the link, defaults to 'http'.
	namespaces : str or list (optional)
		Only include pages in these namespaces, defaults to '0'.

	Returns
	-------
	links : Result
		Rows of [title, url].
	"""
	config = _config(config)
	loc = parse_locator(link_pattern,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	r = wp_q({'list':'exturlusage',
				'eulimit':'max',
				'euprop':['title','url'],
				'euprotocol':protocol if protocol else 'http',
				'euquery':loc.subject,
				'eunamespace':_namespaces(namespaces)},lang=loc.language,config=config)
	return Result.ok([[eu['title'],eu['url']] for eu in r.find('exturlusage').find_all('eu')])

def _simplify_statement(statement):
	'''Returns the plain value of a Wikidata statement, None for unsupported datatypes.'''
	mainsnak = statement.get('mainsnak')
	if mainsnak is None:
		return None
	datavalue = mainsnak.get('datavalue')
	if datavalue is None:
		return None
	datatype = mainsnak.get('datatype')
	if datatype in ('string','commonsMedia','url','math','external-id'):
		return datavalue['value']
	elif datatype == 'monolingualtext':
		return datavalue['value']['text']
	elif datatype == 'wikibase-item':
		return 'Q'+str(datavalue['value']['numeric-id'])
	elif datatype == 'time':
		return datavalue['value']['time']
	elif datatype == 'quantity':
		return datavalue['value']['amount']
	return None

def _wd_labels(ids,config):
	'''Gets the labels of Wikidata entities (items or properties) by chunks of 50.'''
	labels = {}
	for pos in range(0,len(ids),50):
		chunk = ids[pos:pos+50]
		entities = wd_q({'languages':config.language,'props':'labels','ids':chunk},config=config)['entities']
		for item in chunk:
			try:
				labels[item] = entities[item]['labels'][config.language]['value']
			except KeyError:
				labels[item] = None
	return labels

@custom_function('WIKIDATAFACTS')
def wikidata_facts(article,multi_object_mode=None,properties=None,config=None):
	"""
	Gets the Wikidata facts of a Wikipedia article or of a Wikidata item.

	Parameters
	----------
	article : str
		Article in the format 'language:Article_Title' ('de:Berlin') or a qid ('Q42').
	multi_object_mode : str (optional)
		What to do with properties that have more than one value:
		'first' keeps the first value, 'all' keeps every value.
		By default only single-valued properties are returned.
	properties : str or list (optional)
		Limits the facts to these properties ('P31').

	Returns
	-------
	facts : Result
		Rows of [property label, value]. Item values are replaced by their labels.
	"""
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	allowed = unique_languages(properties)
	if is_qid(loc.subject):
		d = {'props':'claims','ids':loc.subject}
	else:
		d = {'sites':loc.language+'wiki','props':'claims','titles':underscore(loc.subject)}
	r = wd_q(d,config=config)
	claims = list(r['entities'].values())[0]['claims']
	props = [p for p in claims.keys() if (len(allowed)==0)|(p in allowed)]
	simplified = {}
	qids = []
	for p in props:
		values = [v for v in [_simplify_statement(s) for s in claims[p]] if v is not None]
		simplified[p] = values
		qids += [v for v in values if isinstance(v,str) and is_qid(v) and v not in qids]
	labels = _wd_labels(props+qids,config)
	mode = (multi_object_mode or '').lower()
	rows = []
	for p in props:
		values = simplified[p]
		if len(values) == 1:
			pass
		elif (len(values) > 1)&(mode in ('first','all')):
			values = values[:1] if mode == 'first' else values
		else:
			continue
		label = labels.get(p)
		for value in values:
			value = labels.get(value) if (isinstance(value,str) and is_qid(value)) else value
			if label and value:
				rows.append([label,value])
	return Result.ok(rows)

def _wikidata_qid(article,config):
	loc = parse_locator(article,config.language)
	if loc is None:
		return None
	r = wp_q({'format':'json',
				'formatversion':2,
				'redirects':1,
				'prop':'pageprops',
				'ppprop':'wikibase_item',
				'titles':loc.subject},lang=loc.language,config=config)
	return r['query']['pages'][0]['pageprops']['wikibase_item']

@custom_function('WIKIDATAQID')
def wikidata_qid(article,config=None):
	"""
	Gets the qid of the Wikidata item of an article.

	Parameters
	----------
	article : str or list
		Article in the format 'language:Article_Title' ('de:Berlin').
		A list (or a range, a list of rows) of articles gives one row per article,
		with '' where no item was found.

	Returns
	-------
	qid : Result
		[qid], or rows of [qid] when a list was given.
	"""
	config = _config(config)
	if _isiter(article):
		rows = []
		for cell in article:
			cell = cell[0] if _isiter(cell) else cell
			qid = wikidata_qid(cell,config=config)
			rows.append([qid[0] if qid.is_ok else ''])
		return Result.ok(rows) if any(row[0] for row in rows) else Result.empty(NOT_FOUND)
	qid = _wikidata_qid(article,config)
	if qid is None:
		return Result.empty(NO_INPUT)
	return Result.ok([qid])

def _wd_terms(qid,kind,target_languages,config):
	config = _config(config)
	if not qid:
		return Result.empty(NO_INPUT)
	langs = unique_languages(target_languages)
	if len(langs) == 0:
		langs = [config.language]
	if langs == ['all']:
		langs = []
	d = {'props':kind,'ids':qid}
	if len(langs) != 0:
		d['languages'] = langs
	terms = wd_q(d,config=config)['entities'][qid][kind]
	return Result.ok([[lang,terms[lang]['value']] for lang in sorted(terms.keys())])

@custom_function('WIKIDATALABELS')
def wikidata_labels(qid,target_languages=None,config=None):
	"""
	Gets the labels of a Wikidata item.

	Parameters
	----------
	qid : str
		Wikidata item ('Q64').
	target_languages : str or list (optional)
		Languages to get, 'all' for every language. Defaults to the configured language.

	Returns
	-------
	labels : Result
		Rows of [lang, label] sorted by language.
	"""
	return _wd_terms(qid,'labels',target_languages,config)

@custom_function('WIKIDATADESCRIPTIONS')
def wikidata_descriptions(qid,target_languages=None,config=None):
	'''Same as wikidata_labels for the descriptions of the item.'''
	return _wd_terms(qid,'descriptions',target_languages,config)

@custom_function('WIKIDATALOOKUP')
def wikidata_lookup(property_id,value,config=None):
	"""
	Gets the Wikidata items that have a statement with the given value.

	Examples
	--------
	Items whose ISO 3166-1 alpha-3 code (P298) is AUT:
	>>> wikidata_lookup('P298','AUT')
	"""
	config = _config(config)
	if (not property_id)|(not value):
		return Result.empty(NO_INPUT)
	r = wd_q({'action':'query',
				'list':'search',
				'srlimit':'max',
				'srsearch':'haswbstatement:'+str(property_id)+'='+str(value)},config=config)
	return Result.ok(_titles(r['query']['search']))

def _default_range(start,end):
	today = _today()
	start = start if start else today-relativedelta(days=30)
	end   = end if end else today-relativedelta(days=1)
	return start,end

def _views(items,sum_only):
	if sum_only:
		return Result.ok([sum([item['views'] for item in items])])
	rows = [[parse_rest_timestamp(item['timestamp']),item['views']] for item in items]
	return Result.ok(newest_first(rows))

@custom_function('WIKIPAGEVIEWS')
def pageviews(article,start=None,end=None,sum_only=False,config=None):
	"""
	Gets the daily pageviews (user agents, all access methods) of a Wikipedia article.

	Parameters
	----------
	article : str
		Article in the format 'language:Article_Title' ('de:Berlin').
	start : str or date (optional)
		First day ('20160101'), defaults to 30 days ago.
	end : str or date (optional)
		Last day ('20160131'), defaults to yesterday.
	sum_only : boolean (False)
		If True only the sum of the views in the period is returned.

	Returns
	-------
	views : Result
		Rows of [timestamp, views], newest first, or [sum].
	"""
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	start,end = _default_range(start,end)
	r = rest_q(['pageviews','per-article',loc.language+'.wikipedia','all-access','user',
				underscore(loc.subject),'daily',iso_date(start),iso_date(end)],config=config)
	return _views(r['items'],sum_only)

@custom_function('WIKIPAGEVIEWSPERARTICLE')
def pageviews_per_article(project,article,access=None,agent=None,granularity=None,start=None,end=None,sum_only=False,config=None):
	"""
	Gets the pageviews of a page of any Wikimedia project.

	Parameters
	----------
	project : str
		Project, e.g. 'en.wikipedia'.
	article : str
		Title of the page (without language prefix).
	access : str (optional)
		Access method, defaults to 'all-access'.
	agent : str (optional)
		Agent type, defaults to 'all-agents'.
	granularity : str (optional)
		'daily' (default) or 'monthly'.
	start, end : str or date (optional)
		Period, defaults to the last 30 days.
	sum_only : boolean (False)
		If True only the sum of the views in the period is returned.
	"""
	config = _config(config)
	if (not project)|(not article):
		return Result.empty(NO_INPUT)
	start,end = _default_range(start,end)
	r = rest_q(['pageviews','per-article',project,access or 'all-access',agent or 'all-agents',
				underscore(str(article)),granularity or 'daily',iso_date(start),iso_date(end)],config=config)
	return _views(r['items'],sum_only)

@custom_function('WIKIPAGEVIEWSAGGREGATE')
def pageviews_aggregate(project,access=None,agent=None,granularity=None,start=None,end=None,config=None):
	'''
	Gets the aggregated pageviews of a project as rows of [timestamp, views], newest first.
	String dates use the hourly format yyyymmddhh ('2016010100').
	'''
	config = _config(config)
	if not project:
		return Result.empty(NO_INPUT)
	start,end = _default_range(start,end)
	r = rest_q(['pageviews','aggregate',project,access or 'all-access',agent or 'all-agents',
				granularity or 'daily',iso_date_hour(start),iso_date_hour(end)],config=config)
	return _views(r['items'],False)

@custom_function('WIKIPAGEVIEWSTOP')
def pageviews_top(project,access=None,date=None,config=None):
	"""
	Gets the most viewed pages of a project on a given day.

	Returns
	-------
	top : Result
		Rows of [title, views], in the ranking order of the API.
	"""
	config = _config(config)
	if not project:
		return Result.empty(NO_INPUT)
	date = iso_date(date if date else _today()-relativedelta(days=1))
	r = rest_q(['pageviews','top',project,access or 'all-access',date[:4],date[4:6],date[6:8]],config=config)
	return Result.ok([[spaces(a['article']),a['views']] for a in r['items'][0]['articles']])

@custom_function('WIKIUNIQUEDEVICES')
def unique_devices(project,access_site=None,granularity=None,start=None,end=None,config=None):
	'''Gets the number of unique devices of a project as rows of [timestamp, devices], newest first.'''
	config = _config(config)
	if not project:
		return Result.empty(NO_INPUT)
	start,end = _default_range(start,end)
	r = rest_q(['unique-devices',project,access_site or 'all-sites',granularity or 'daily',
				iso_date(start),iso_date(end)],config=config)
	rows = [[parse_rest_timestamp(item['timestamp']),item['devices']] for item in r['items']]
	return Result.ok(newest_first(rows))

@custom_function('WIKIPAGEEDITS')
def page_edits(article,start=None,end=None,config=None):
	"""
	Gets the edits of a Wikipedia article and the size change of every edit.

	Parameters
	----------
	article : str
		Article in the format 'language:Article_Title' ('de:Berlin').
	start : str or date (optional)
		Since when ('2016-01-01T00:00:00'), defaults to 30 days ago.
	end : str or date (optional)
		Until when ('2016-01-31T23:59:59'), defaults to today.

	Returns
	-------
	edits : Result
		Rows of [timestamp, delta], newest first.
		The oldest revision of the period gives no row since it has nothing to compare to.
	"""
	config = _config(config)
	loc = parse_locator(article,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	start = iso_datetime(start if start else _today()-relativedelta(days=30),'T00:00:00')
	end   = iso_datetime(end if end else _today(),'T23:59:59')
	r = wp_q({'prop':'revisions',
				'rvprop':['size','timestamp'],
				'rvlimit':'max',
				'rvstart':end,   # rvstart is the newer bound
				'rvend':start,
				'titles':underscore(loc.subject)},lang=loc.language,config=config)
	revs = r.find('revisions').find_all('rev')
	rows = []
	for i in range(len(revs)-1):
		delta = int(revs[i]['size'])-int(revs[i+1]['size'])
		rows.append([parse_revision_timestamp(revs[i]['timestamp']),delta])
	return Result.ok(newest_first(rows))

@custom_function('WIKISEARCH')
def search(query,did_you_mean=False,namespaces=None,config=None):
	"""
	Searches Wikipedia.

	Parameters
	----------
	query : str
		Query in the format 'language:Query' ('de:Berlin').
	did_you_mean : boolean (False)
		If True rows of [title, suggestion] are returned, the suggestion is
		only given in the first row (the query itself if there is none).
	namespaces : str or list (optional)
		Only include pages in these namespaces, defaults to '0'.
	"""
	config = _config(config)
	loc = parse_locator(query,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	r = wp_q({'format':'json',
				'list':'search',
				'srinfo':'suggestion',
				'srprop':'',
				'srlimit':'max',
				'srsearch':loc.subject,
				'srnamespace':_namespaces(namespaces)},lang=loc.language,config=config)
	titles = _titles(r['query']['search'])
	if not did_you_mean:
		return Result.ok(titles)
	suggestion = r['query'].get('searchinfo',{}).get('suggestion') or loc.subject
	return Result.ok([[title,suggestion if i == 0 else ''] for i,title in enumerate(titles)])

@custom_function('WIKIQUARRY')
def quarry(query_id,config=None):
	'''Gets the latest result of a Quarry query. The first row holds the headers.'''
	config = _config(config)
	if not query_id:
		return Result.empty(NO_INPUT)
	r = quarry_q(query_id,config=config)
	return Result.ok([r['headers']]+r['rows'])

@custom_function('GOOGLESUGGEST')
def google_suggest(query,config=None):
	'''Gets the Google Suggest completions of a query given as 'language:Query'.'''
	config = _config(config)
	loc = parse_locator(query,config.language)
	if loc is None:
		return Result.empty(NO_INPUT)
	r = suggest_q(loc.subject,lang=loc.language,config=config)
	return Result.ok([s.find('suggestion')['data'] for s in r.find_all('completesuggestion')])
