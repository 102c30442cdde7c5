"""Checking a web site for broken links with a pool of crawler threads."""

from __future__ import annotations

import argparse
import ipaddress
import queue
import sys
import threading
from dataclasses import dataclass
from pprint import pformat
from typing import Optional, Sequence, Union
from urllib.parse import urljoin, urlsplit

import requests
from bs4 import BeautifulSoup

DEFAULT_START_URL = "https://www.google.org"
DEFAULT_THREAD_COUNT = 16


class LinkCheckError(Exception):
    """Raised when a page cannot be fetched."""


class BadResponseError(LinkCheckError):
    """Raised when a page is answered with a status other than success."""

    def __init__(self, status: str) -> None:
        super().__init__(f"bad http response: {status}")
        self.status = status


@dataclass(frozen=True)
class CrawlCommand:
    """A page to visit, and whether to collect the links on it."""

    url: str
    extract_links: bool


@dataclass(frozen=True)
class _CrawlFailure:
    url: str
    error: LinkCheckError


def _domain(url: str) -> Optional[str]:
    host = urlsplit(url).hostname
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def visit_page(session: requests.Session, command: CrawlCommand) -> list[str]:
    """Fetch the page of ``command`` and return the absolute URLs it links to.

    Links are only collected when ``command.extract_links`` is set.
    Raises BadResponseError for a non-2xx status and LinkCheckError when the
    request itself fails.
    """
    print(f"Checking {command.url}")
    try:
        response = session.get(command.url)
    except requests.RequestException as err:
        raise LinkCheckError(f"request error: {err}") from err
    if not 200 <= response.status_code < 300:
        raise BadResponseError(f"{response.status_code} {response.reason}".strip())

    if not command.extract_links:
        return []

    base_url = response.url
    try:
        body = response.text
    except requests.RequestException as err:
        raise LinkCheckError(f"request error: {err}") from err
    document = BeautifulSoup(body, "html.parser")

    links = []
    for anchor in document.find_all("a", href=True):
        href = anchor["href"]
        try:
            links.append(urljoin(base_url, href))
        except ValueError as err:
            print(f"On {base_url}: ignored unparsable {href!r}: {err}")
    return links


class CrawlState:
    """The pages seen so far in a crawl that stays within one domain."""

    def __init__(self, start_url: str) -> None:
        domain = _domain(start_url)
        if domain is None:
            raise ValueError(f"start URL has no domain: {start_url!r}")
        self.domain = domain
        self.visited_pages = {start_url}

    def should_extract_links(self, url: str) -> bool:
        """Return whether the links within the given page should be extracted."""
        return _domain(url) == self.domain

    def mark_visited(self, url: str) -> bool:
        """Mark ``url`` as visited; return False if it already was."""
        if url in self.visited_pages:
            return False
        self.visited_pages.add(url)
        return True


_Outcome = Union[list, _CrawlFailure]


def _crawl_worker(
    commands: "queue.Queue[Optional[CrawlCommand]]",
    results: "queue.Queue[_Outcome]",
) -> None:
    with requests.Session() as session:
        while (command := commands.get()) is not None:
            try:
                results.put(visit_page(session, command))
            except LinkCheckError as err:
                results.put(_CrawlFailure(command.url, err))


def check_links(start_url: str, thread_count: int = DEFAULT_THREAD_COUNT) -> list[str]:
    """Crawl from ``start_url`` and return the URLs that could not be fetched.

    Links are followed only on pages of the start URL's domain; pages on
    other domains are fetched but not searched for further links.
    """
    if thread_count < 1:
        raise ValueError("thread_count must be at least 1")
    state = CrawlState(start_url)
    commands: "queue.Queue[Optional[CrawlCommand]]" = queue.Queue()
    results: "queue.Queue[_Outcome]" = queue.Queue()
    threads = [
        threading.Thread(target=_crawl_worker, args=(commands, results), daemon=True)
        for _ in range(thread_count)
    ]
    for thread in threads:
        thread.start()

    bad_urls: list[str] = []
    try:
        commands.put(CrawlCommand(start_url, extract_links=True))
        pending = 1
        while pending:
            outcome = results.get()
            pending -= 1
            if isinstance(outcome, _CrawlFailure):
                bad_urls.append(outcome.url)
                print(f"Got crawling error: {outcome.error}")
                continue
            for url in outcome:
                if state.mark_visited(url):
                    commands.put(CrawlCommand(url, state.should_extract_links(url)))
                    pending += 1
    finally:
        for _ in threads:
            commands.put(None)
    return bad_urls


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check a site for bad links and print them."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("start_url", nargs="?", default=DEFAULT_START_URL)
    parser.add_argument("--threads", type=int, default=DEFAULT_THREAD_COUNT)
    args = parser.parse_args(argv)
    try:
        bad_urls = check_links(args.start_url, args.threads)
    except ValueError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    print(f"Bad URLs: {pformat(bad_urls)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())