# === File: fetch.py
# Version: 0.01.00
# Date: 2026-10-19 10:32:00 UTC
# Author: K-Cim
# Description: Download <link rel="stylesheet"> targets and replace each link
# with a <style> tag holding the downloaded CSS.

import logging
import posixpath

import requests

from cssinliner.errors import FetchError

logger = logging.getLogger(__name__)


def to_absolute_uri(url, base):
    """Resolve a stylesheet href against the parsed source URL (or None)."""
    if base is None or url.startswith("http://") or url.startswith("https://"):
        return url
    if url.startswith("//"):
        return f"{base.scheme}:{url}"
    if url.startswith("/"):
        return f"{base.scheme}://{base.netloc}{url}"
    if not url:
        return url

    path = posixpath.normpath(posixpath.join(base.path or "/", url))
    if base.scheme:
        return f"{base.scheme}://{base.netloc}{path}"
    return f"{base.netloc}{path}"


def download_stylesheet(url, proxy=None, timeout=10):
    proxies = {"http": proxy, "https": proxy} if proxy else None
    try:
        r = requests.get(url, proxies=proxies, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(url, e) from e
    return r.text


def fetch_external_stylesheets(soup, base=None, proxy=None, timeout=10):
    """Inline every linked stylesheet in place. Stops at the first failure."""
    for link in soup.find_all("link", rel=True):
        # "alternate stylesheet" is not applied by default
        rel = [value.lower() for value in link.get("rel") or []]
        href = link.get("href")
        if rel != ["stylesheet"] or not href:
            continue

        url = to_absolute_uri(href, base)
        logger.info("Fetching stylesheet %s", url)
        css = download_stylesheet(url, proxy=proxy, timeout=timeout)

        style_tag = soup.new_tag("style", attrs={"type": "text/css"})
        style_tag.string = css
        link.replace_with(style_tag)
