#!/usr/bin/env python3
"""
RosterScraper against offline team pages
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

import logging

import requests

from nba2k_roster_scraper import PageFetcher, RosterScraper, TeamConfig
from html_pages import BASE_URL, FakeSession, roster_page

TEAM_URL = f'{BASE_URL}/teams/miami-heat'


def roster_scraper(pages, timeout=None):
    session = FakeSession(pages)
    return RosterScraper(PageFetcher(session=session, timeout=timeout), BASE_URL), session


def test_three_entries_in_document_order():
    hrefs = [
        f'{BASE_URL}/jimmy-butler',
        f'{BASE_URL}/bam-adebayo',
        f'{BASE_URL}/tyler-herro',
    ]
    scraper, session = roster_scraper({TEAM_URL: roster_page(hrefs)})

    assert scraper.extract_roster('miami-heat') == hrefs
    assert session.requests[0]['url'] == TEAM_URL
    assert session.requests[0]['headers'] == {'User-Agent': TeamConfig.USER_AGENT}


def test_relative_hrefs_resolved():
    scraper, _ = roster_scraper({TEAM_URL: roster_page(['/jimmy-butler', 'bam-adebayo'])})

    assert scraper.extract_roster('miami-heat') == [
        f'{BASE_URL}/jimmy-butler',
        f'{BASE_URL}/teams/bam-adebayo',
    ]


def test_relative_hrefs_keep_local_host_and_port():
    local = 'http://localhost:8000'
    session = FakeSession({f'{local}/teams/miami-heat': roster_page(['/bam-adebayo', '/tyler-herro'])})
    scraper = RosterScraper(PageFetcher(session=session), local)

    assert scraper.extract_roster('miami-heat') == [
        'http://localhost:8000/bam-adebayo',
        'http://localhost:8000/tyler-herro',
    ]


def test_only_first_tbody_is_read():
    second = '<table><tbody><tr><td class="entry-font"><a href="/not-on-roster">X</a></td></tr></tbody></table>'
    page = roster_page([f'{BASE_URL}/jimmy-butler'], extra_tables=second)
    scraper, _ = roster_scraper({TEAM_URL: page})

    assert scraper.extract_roster('miami-heat') == [f'{BASE_URL}/jimmy-butler']


def test_entries_without_links_are_skipped():
    page = """
    <table><tbody>
      <tr><td class="entry-font"><a href="https://www.2kratings.com/jimmy-butler">Jimmy Butler</a></td></tr>
      <tr><td class="entry-font">Two-Way Player</td></tr>
      <tr><td class="entry-font"><a href="">Empty</a></td></tr>
      <tr><td class="entry-font"><a>No href</a></td></tr>
    </tbody></table>
    """
    scraper, _ = roster_scraper({TEAM_URL: page})

    assert scraper.extract_roster('miami-heat') == ['https://www.2kratings.com/jimmy-butler']


def test_empty_roster_returns_none(caplog):
    scraper, _ = roster_scraper({TEAM_URL: roster_page([])})

    with caplog.at_level(logging.WARNING):
        assert scraper.extract_roster('miami-heat') is None

    assert 'miami-heat' in caplog.text


def test_page_without_table_returns_none():
    scraper, _ = roster_scraper({TEAM_URL: '<html><body><p>Maintenance</p></body></html>'})

    assert scraper.extract_roster('miami-heat') is None


def test_network_error_returns_none(caplog):
    scraper, _ = roster_scraper({TEAM_URL: requests.ConnectionError('name resolution failed')})

    with caplog.at_level(logging.WARNING):
        assert scraper.extract_roster('miami-heat') is None

    assert 'miami-heat' in caplog.text
    assert 'name resolution failed' in caplog.text


def test_not_found_returns_none(caplog):
    scraper, _ = roster_scraper({})

    with caplog.at_level(logging.WARNING):
        assert scraper.extract_roster('seattle-supersonics') is None

    assert '404' in caplog.text


def test_timeout_passed_to_session():
    scraper, session = roster_scraper({TEAM_URL: roster_page([f'{BASE_URL}/jimmy-butler'])}, timeout=12.5)
    scraper.extract_roster('miami-heat')

    assert session.requests[0]['timeout'] == 12.5
