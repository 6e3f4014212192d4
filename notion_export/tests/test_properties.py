from notion_export.properties import (
    get_text, get_number, get_checkbox, get_date, first_value
)


def _runs(*texts):
    return [{"type": "text", "plain_text": text} for text in texts]


def test_title_runs_are_joined():
    prop = {"type": "title", "title": _runs("Foo", "Bar")}
    assert get_text(prop) == "FooBar"


def test_rich_text_and_email():
    assert get_text({"type": "rich_text", "rich_text": _runs("a", "b", "c")}) == "abc"
    assert get_text({"type": "email", "email": "this@is.us"}) == "this@is.us"


def test_text_empty_cases():
    assert get_text(None) == ""
    assert get_text({"type": "title", "title": []}) == ""
    assert get_text({"type": "email", "email": None}) == ""
    assert get_text({"type": "number", "number": 3}) == ""


def test_number():
    assert get_number({"type": "number", "number": 3}) == 3
    assert get_number({"type": "number", "number": 2.5}) == 2.5
    # zero is a value, not an empty cell
    assert get_number({"type": "number", "number": 0}) == 0
    assert get_number({"type": "number", "number": None}) == ""
    assert get_number(None) == ""
    assert get_number({"type": "rich_text", "rich_text": _runs("3")}) == ""


def test_checkbox():
    assert get_checkbox({"type": "checkbox", "checkbox": True}) == "true"
    assert get_checkbox({"type": "checkbox", "checkbox": False}) == "false"
    assert get_checkbox(None) == ""
    assert get_checkbox({"type": "number", "number": 1}) == ""


def test_date():
    prop = {"type": "date", "date": {"start": "2024-05-01", "end": None}}
    assert get_date(prop) == "2024-05-01"
    assert get_date({"type": "date", "date": None}) == ""
    assert get_date({"type": "date", "date": {"start": None}}) == ""
    assert get_date(None) == ""
    assert get_date({"type": "title", "title": _runs("2024-05-01")}) == ""


def test_first_value():
    props = {
        "商品": {"type": "title", "title": _runs("Old name")},
        "商品名稱": {"type": "title", "title": []},
    }
    assert first_value(get_text, props, "商品名稱", "商品") == "Old name"
    props["商品名稱"] = {"type": "title", "title": _runs("New name")}
    assert first_value(get_text, props, "商品名稱", "商品") == "New name"
    assert first_value(get_text, {}, "商品名稱", "商品") == ""


def test_malformed_shapes_degrade():
    for getter in (get_text, get_number, get_checkbox, get_date):
        assert getter("oops") == ""
        assert getter(["oops"]) == ""
    assert get_text({"type": "title", "title": [None, {"plain_text": "ok"}, "x"]}) == "ok"
    assert get_text({"type": "rich_text", "rich_text": "not a list"}) == ""
    assert get_text({"type": "email", "email": {"address": "a@b.c"}}) == ""
    assert get_number({"type": "number", "number": "3"}) == ""
    assert get_date({"type": "date", "date": "2024-05-01"}) == ""
    assert get_date({"type": "date", "date": {"start": 20240501}}) == ""
