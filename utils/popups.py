"""Popup templates for the GDP and endorser layers"""
from html import escape
from typing import Dict, Optional


def _text(props: Optional[Dict], key: str) -> str:
    value = (props or {}).get(key)
    return '' if value is None else escape(str(value))


def gdp_popup_html(props: Optional[Dict]) -> str:
    return (f"<strong>Country:</strong> {_text(props, 'name')}"
            f"<br><strong>GDP:</strong> ${_text(props, 'GDP')}")


def endorser_popup_html(props: Optional[Dict]) -> str:
    website = _text(props, 'Website')
    return (f"<strong>Name:</strong> {_text(props, 'Name')}"
            f"<br><strong>Website:</strong> "
            f'<a href="{website}" target="_blank">{website}</a>')
