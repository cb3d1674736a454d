"""Tests for the Wikidata functions."""

from wikicells import NO_INPUT, NOT_FOUND, OK
from wikicells import wikidata_descriptions, wikidata_facts, wikidata_labels, wikidata_lookup, wikidata_qid

from conftest import params


def item(value):
    return {"mainsnak": {"datatype": "wikibase-item", "datavalue": {"value": {"entity-type": "item", "numeric-id": value}}}}


def string(value, datatype="string"):
    return {"mainsnak": {"datatype": datatype, "datavalue": {"value": value}}}


CLAIMS = {
    "entities": {
        "Q64": {
            "id": "Q64",
            "claims": {
                # instance of: city, capital, big city
                "P31": [item(515), item(5119), item(1549591)],
                # country: Germany
                "P17": [item(183)],
                "P1082": [{"mainsnak": {"datatype": "quantity", "datavalue": {"value": {"amount": "+3645000", "unit": "1"}}}}],
                "P1448": [{"mainsnak": {"datatype": "monolingualtext", "datavalue": {"value": {"text": "Berlin", "language": "de"}}}}],
                "P856": [string("https://www.berlin.de/", "url")],
                # no value
                "P1376": [{"mainsnak": {"datatype": "wikibase-item", "snaktype": "novalue"}}],
                "P625": [{"mainsnak": {"datatype": "globe-coordinate", "datavalue": {"value": {"latitude": 52.5}}}}],
            },
        }
    }
}

LABELS = {
    "entities": {
        key: {"labels": {"en": {"language": "en", "value": value}}}
        for key, value in {
            "P31": "instance of",
            "P17": "country",
            "P1082": "population",
            "P1448": "official name",
            "P856": "official website",
            "P1376": "capital of",
            "P625": "coordinate location",
            "Q515": "city",
            "Q5119": "capital",
            "Q183": "Germany",
        }.items()
    }
}
LABELS["entities"]["Q1549591"] = {"labels": {}}


def add_facts(fake):
    fake.add(CLAIMS, host="www.wikidata.org", props="claims")
    fake.add(LABELS, host="www.wikidata.org", props="labels")


def test_facts_single_values_only(fake, config):
    add_facts(fake)
    result = wikidata_facts("en:Berlin", config=config)
    assert result == [
        ["country", "Germany"],
        ["population", "+3645000"],
        ["official name", "Berlin"],
        ["official website", "https://www.berlin.de/"],
    ]
    q = params(fake.urls[0])
    assert q["sites"] == "enwiki"
    assert q["titles"] == "Berlin"
    assert q["action"] == "wbgetentities"


def test_facts_first_mode(fake, config):
    add_facts(fake)
    result = wikidata_facts("en:Berlin", "FIRST", config=config)
    assert result[0] == ["instance of", "city"]
    assert ["instance of", "capital"] not in result


def test_facts_all_mode_skips_unlabelled_values(fake, config):
    add_facts(fake)
    result = wikidata_facts("en:Berlin", "all", config=config)
    assert result[:2] == [["instance of", "city"], ["instance of", "capital"]]
    assert len(result) == 6


def test_facts_property_filter(fake, config):
    add_facts(fake)
    result = wikidata_facts("en:Berlin", "all", ["P17", "P17"], config=config)
    assert result == [["country", "Germany"]]
    assert params(fake.urls[1])["ids"] == "P17|Q183"


def test_facts_by_qid(fake, config):
    add_facts(fake)
    assert wikidata_facts("Q64", "all", "P17", config=config) == [["country", "Germany"]]
    q = params(fake.urls[0])
    assert q["ids"] == "Q64"
    assert "sites" not in q


def test_facts_labels_are_fetched_in_chunks(fake, config):
    claims = {"entities": {"Q1": {"claims": {"P" + str(i): [string("v")] for i in range(1, 61)}}}}
    fake.add(claims, props="claims")
    fake.add({"entities": {}}, props="labels")
    assert wikidata_facts("Q1", config=config).status == NOT_FOUND
    label_urls = [u for u in fake.urls if params(u).get("props") == "labels"]
    assert [len(params(u)["ids"].split("|")) for u in label_urls] == [50, 10]


def test_facts_missing_entity(fake, config):
    fake.add({"entities": {"-1": {"site": "enwiki", "title": "Nope", "missing": ""}}})
    assert wikidata_facts("en:Nope", config=config).status == NOT_FOUND


def test_qid(fake, config):
    fake.add({"batchcomplete": True, "query": {"pages": [{"pageid": 3354, "ns": 0, "title": "Berlin", "pageprops": {"wikibase_item": "Q64"}}]}})
    assert wikidata_qid("de:Berlin", config=config) == ["Q64"]
    q = params(fake.urls[0])
    assert q["formatversion"] == "2"
    assert q["redirects"] == "1"
    assert q["ppprop"] == "wikibase_item"
    assert q["format"] == "json"


def test_qid_for_a_range(fake, config):
    fake.add({"query": {"pages": [{"pageprops": {"wikibase_item": "Q64"}}]}}, titles="Berlin")
    fake.add({"query": {"pages": [{"ns": 0, "title": "Nope", "missing": True}]}}, titles="Nope")
    assert wikidata_qid([["en:Berlin"], ["en:Nope"], ["Berlin"]], config=config) == [["Q64"], [""], ["Q64"]]


def test_qid_empty_input(fake, config):
    assert wikidata_qid("", config=config).status == NO_INPUT


TERMS = {
    "entities": {
        "Q64": {
            "labels": {"fr": {"language": "fr", "value": "Berlin"}, "de": {"language": "de", "value": "Berlin"}},
            "descriptions": {"de": {"language": "de", "value": "Hauptstadt von Deutschland"}},
        }
    }
}


def test_labels_default_language(fake, config):
    fake.add(TERMS)
    result = wikidata_labels("Q64", config=config)
    assert result == [["de", "Berlin"], ["fr", "Berlin"]]
    q = params(fake.urls[0])
    assert q["languages"] == "en"
    assert q["props"] == "labels"


def test_labels_all_languages(fake, config):
    fake.add(TERMS)
    wikidata_labels("Q64", "all", config=config)
    assert "languages" not in params(fake.urls[0])


def test_labels_target_languages(fake, config):
    fake.add(TERMS)
    wikidata_labels("Q64", ["de", "fr", "de"], config=config)
    assert params(fake.urls[0])["languages"] == "de|fr"


def test_descriptions(fake, config):
    fake.add(TERMS)
    result = wikidata_descriptions("Q64", "de", config=config)
    assert result == [["de", "Hauptstadt von Deutschland"]]
    assert result.status == OK
    assert params(fake.urls[0])["props"] == "descriptions"


def test_lookup(fake, config):
    fake.add({"query": {"search": [{"ns": 0, "title": "Q40"}]}}, host="www.wikidata.org", list="search")
    assert wikidata_lookup("P298", "AUT", config=config) == ["Q40"]
    assert params(fake.urls[0])["srsearch"] == "haswbstatement:P298=AUT"


def test_lookup_needs_both_arguments(fake, config):
    assert wikidata_lookup("P298", "", config=config).status == NO_INPUT
