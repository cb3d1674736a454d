name = "wikicells"

from .classes import Locator,Result,Config,DEFAULT_CONFIG,OK,NO_INPUT,NOT_FOUND,TRANSPORT_ERROR
from .parse_functions import parse_locator,parse_category,parse_point,is_qid,unique_languages
from .functions import FUNCTIONS,synonyms,articles_around,translate,expand,commons_link,category_members,subcategories,categories
from .functions import inbound_links,outbound_links,mutual_links,geocoordinates,link_search
from .functions import wikidata_facts,wikidata_qid,wikidata_labels,wikidata_descriptions,wikidata_lookup
from .functions import pageviews,pageviews_per_article,pageviews_aggregate,pageviews_top,unique_devices,page_edits
from .functions import search,quarry,google_suggest
from .tables import to_frame,HEADERS
from .query import wp_q,wd_q,rest_q
