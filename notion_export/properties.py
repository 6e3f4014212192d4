"""Extract plain values from Notion property objects.

A property looks like ``{"type": "number", "number": 3}``: the payload
sits under the key named by ``type``. Every getter returns an empty value
instead of raising when the property is missing or of another type, so a
single malformed row never aborts an export.
"""
from typing import Dict, Optional, Union

TEXT_TYPES = ("title", "rich_text")


def _payload(prop, prop_type: str):
    """Return the payload of `prop` if it is a property of `prop_type`."""
    if not isinstance(prop, dict) or prop.get("type") != prop_type:
        return None
    return prop.get(prop_type)


def _join_runs(runs) -> str:
    if not isinstance(runs, list):
        return ""
    return "".join(
        run.get("plain_text") or ""
        for run in runs if isinstance(run, dict)
    )


def get_text(prop: Optional[Dict]) -> str:
    for prop_type in TEXT_TYPES:
        runs = _payload(prop, prop_type)
        if runs:
            return _join_runs(runs)
    email = _payload(prop, "email")
    if isinstance(email, str):
        return email
    return ""


def get_number(prop: Optional[Dict]) -> Union[int, float, str]:
    value = _payload(prop, "number")
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return ""
    return value


def get_checkbox(prop: Optional[Dict]) -> str:
    if not isinstance(prop, dict) or prop.get("type") != "checkbox":
        return ""
    # The front-end compares against these literal strings
    return "true" if prop.get("checkbox") else "false"


def get_date(prop: Optional[Dict]) -> str:
    date = _payload(prop, "date")
    if not isinstance(date, dict):
        return ""
    start = date.get("start")
    return start if isinstance(start, str) else ""


def first_value(getter, props: Dict, *names: str):
    """Apply `getter` to each of the named properties in turn and return the
    first non-empty result.

    Lets one field read from alternately-named source properties.
    """
    for name in names:
        value = getter(props.get(name))
        if value != "":
            return value
    return ""
