"""Fixed-column mapping for profile documents.

Instead of discovering columns from the data, profile exports use the
predeclared `PROFILE_HEADERS` and derive each cell with a field-specific
rule. Links pointing at social networks are split away from the website
and other links so the audited columns stay predictable.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlsplit

from .accessors import first_value, get_value_by_path
from .constants import EXCLUDED_SOCIAL_DOMAINS, LIST_ITEM_SEPARATOR
from .scalarize import RECURSE, format_primitive, scalarize, to_compact_json

PROFILE_HEADERS = [
    'name',
    'headline',
    'location',
    'email',
    'phone',
    'website',
    'social_links',
    'other_links',
    'skills',
    'summary',
]

# A scheme such as 'https:' or 'mailto:'; 'host:8080' is a port, not a scheme
_SCHEME_RE = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.-]*:(?!\d)')


def _domain_pattern(domains: Iterable[str]):
    alternatives = '|'.join(re.escape(d) for d in domains)
    return re.compile(rf'(?<![a-z0-9-])(?:{alternatives})(?![a-z0-9-])', re.IGNORECASE)


_SOCIAL_RE = _domain_pattern(EXCLUDED_SOCIAL_DOMAINS)


def url_hostname(url: str) -> Optional[str]:
    """Hostname of `url` (scheme optional), lower-cased and without `www.`."""
    text = url.strip()
    if not _SCHEME_RE.match(text):
        text = f"https://{text}"
    host = urlsplit(text).hostname
    if not host:
        return None
    host = host.lower()
    if host.startswith('www.'):
        host = host[4:]
    return host


def is_social_url(url: str, domains: Iterable[str] = EXCLUDED_SOCIAL_DOMAINS) -> bool:
    if not isinstance(url, str) or not url.strip():
        return False
    domains = tuple(d.lower() for d in domains)

    try:
        host = url_hostname(url)
    except ValueError:
        # urlsplit rejects e.g. unbalanced IPv6 brackets; inspect the raw text
        pattern = _SOCIAL_RE if domains == EXCLUDED_SOCIAL_DOMAINS else _domain_pattern(domains)
        return bool(pattern.search(url))

    if host is None:
        return False
    return any(host == d or host.endswith(f".{d}") for d in domains)


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def join_values(value: Any) -> str:
    """Newline-join a scalar or list; objects inside lists become compact JSON."""
    parts = []
    for v in _as_list(value):
        if isinstance(v, (dict, list)):
            parts.append(to_compact_json(v))
        else:
            parts.append(format_primitive(v))
    return LIST_ITEM_SEPARATOR.join(p for p in parts if p != '')


def _link_urls(value: Any) -> List[str]:
    urls: List[str] = []
    for item in _as_list(value):
        if isinstance(item, str):
            urls.append(item.strip())
        elif isinstance(item, dict):
            url = item.get('url') or item.get('href')
            if isinstance(url, str):
                urls.append(url.strip())
    return [u for u in urls if u]


def _dedupe(values: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for v in values:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out


def _profile_name(document: Dict[str, Any]) -> str:
    name = first_value(document, 'name', 'full_name', 'contact.name')
    if isinstance(name, str):
        return name.strip()
    if name is not None and not isinstance(name, (dict, list)):
        return format_primitive(name)

    parts = [document.get('first_name'), document.get('last_name')]
    return ' '.join(str(p).strip() for p in parts if isinstance(p, str) and p.strip())


def _skills(value: Any) -> str:
    names = []
    for item in _as_list(value):
        if isinstance(item, dict):
            item = item.get('name')
        if item is None or isinstance(item, (dict, list)):
            continue
        names.append(format_primitive(item))
    return LIST_ITEM_SEPARATOR.join(n for n in names if n)


def _plain_cell(value: Any) -> str:
    cell = scalarize(value)
    if cell is RECURSE:
        return to_compact_json(value)
    return cell


def map_profile_document(document: Any) -> Dict[str, str]:
    """Map a profile document onto `PROFILE_HEADERS`."""
    row = {h: '' for h in PROFILE_HEADERS}
    if not isinstance(document, dict):
        return row

    website_value = first_value(document, 'contact.website', 'website')
    websites = _link_urls(website_value)
    links = _dedupe(
        _link_urls(get_value_by_path(document, 'contact.links'))
        + _link_urls(document.get('links'))
        + websites
    )

    own_sites = [u for u in websites if not is_social_url(u)]
    social = [u for u in links if is_social_url(u)]
    other = [u for u in links if not is_social_url(u) and u not in own_sites]

    row['name'] = _profile_name(document)
    row['email'] = join_values(first_value(document, 'contact.email', 'email'))
    row['phone'] = join_values(first_value(document, 'contact.phone', 'phone'))
    row['website'] = LIST_ITEM_SEPARATOR.join(own_sites)
    row['social_links'] = LIST_ITEM_SEPARATOR.join(social)
    row['other_links'] = LIST_ITEM_SEPARATOR.join(other)
    row['skills'] = _skills(document.get('skills'))

    for field in ('headline', 'location', 'summary'):
        row[field] = _plain_cell(document.get(field))

    return row
