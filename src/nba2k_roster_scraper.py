#!/usr/bin/env python3
"""
NBA 2K Roster Scraper - Unified Architecture
Scrapes per-team rosters and per-player ratings from 2kratings.com into one CSV

Usage:
    python src/nba2k_roster_scraper.py
    python src/nba2k_roster_scraper.py --team boston-celtics --team miami-heat
    python src/nba2k_roster_scraper.py --output data/2kroster_latest.csv --max-workers 4
"""

import os
import re
import csv
import sys
import argparse
import logging
import tempfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import List, Dict, Any, Optional, Sequence, Tuple, FrozenSet
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup, NavigableString, Tag

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# FIELD LAYOUT
# ============================================================================

# (attribute, CSV column, label shown next to the rating on the player page)
# List order is the order of the attribute boxes on the page.
SKILL_ATTRIBUTES: List[Tuple[str, str, str]] = [
    # Outside scoring
    ('close_shot', 'closeShot', 'Close Shot'),
    ('mid_range_shot', 'midRangeShot', 'Mid-Range Shot'),
    ('three_point_shot', 'threePointShot', 'Three-Point Shot'),
    ('free_throw', 'freeThrow', 'Free Throw'),
    ('shot_iq', 'shotIQ', 'Shot IQ'),
    ('offensive_consistency', 'offensiveConsistency', 'Offensive Consistency'),
    # Athleticism
    ('speed', 'speed', 'Speed'),
    ('agility', 'agility', 'Agility'),
    ('strength', 'strength', 'Strength'),
    ('vertical', 'vertical', 'Vertical'),
    ('stamina', 'stamina', 'Stamina'),
    ('hustle', 'hustle', 'Hustle'),
    ('overall_durability', 'overallDurability', 'Overall Durability'),
    # Inside scoring
    ('layup', 'layup', 'Layup'),
    ('standing_dunk', 'standingDunk', 'Standing Dunk'),
    ('driving_dunk', 'drivingDunk', 'Driving Dunk'),
    ('post_hook', 'postHook', 'Post Hook'),
    ('post_fade', 'postFade', 'Post Fade'),
    ('post_control', 'postControl', 'Post Control'),
    ('draw_foul', 'drawFoul', 'Draw Foul'),
    ('hands', 'hands', 'Hands'),
    # Playmaking
    ('pass_accuracy', 'passAccuracy', 'Pass Accuracy'),
    ('ball_handle', 'ballHandle', 'Ball Handle'),
    ('speed_with_ball', 'speedWithBall', 'Speed with Ball'),
    ('pass_iq', 'passIQ', 'Pass IQ'),
    ('pass_vision', 'passVision', 'Pass Vision'),
    # Defense
    ('interior_defense', 'interiorDefense', 'Interior Defense'),
    ('perimeter_defense', 'perimeterDefense', 'Perimeter Defense'),
    ('steal', 'steal', 'Steal'),
    ('block', 'block', 'Block'),
    ('help_defense_iq', 'helpDefenseIQ', 'Help Defense IQ'),
    ('pass_perception', 'passPerception', 'Pass Perception'),
    ('defensive_consistency', 'defensiveConsistency', 'Defensive Consistency'),
    # Rebounding
    ('offensive_rebound', 'offensiveRebound', 'Offensive Rebound'),
    ('defensive_rebound', 'defensiveRebound', 'Defensive Rebound'),
]

# Read by position within the .badge-count elements
BADGE_TIERS: List[Tuple[str, str]] = [
    ('legendary_badge_count', 'legendaryBadgeCount'),
    ('purple_badge_count', 'purpleBadgeCount'),
    ('gold_badge_count', 'goldBadgeCount'),
    ('silver_badge_count', 'silverBadgeCount'),
    ('bronze_badge_count', 'bronzeBadgeCount'),
    ('badge_count', 'badgeCount'),
]

# (attribute, CSV column, tab selector)
BADGE_CATEGORIES: List[Tuple[str, str, str]] = [
    ('outside_scoring_badge_count', 'outsideScoringBadgeCount', '#pills-outscoring-tab'),
    ('inside_scoring_badge_count', 'insideScoringBadgeCount', '#pills-inscoring-tab'),
    ('playmaking_badge_count', 'playmakingBadgeCount', '#pills-playmaking-tab'),
    ('defensive_badge_count', 'defensiveBadgeCount', '#pills-defense-tab'),
    ('rebounding_badge_count', 'reboundingBadgeCount', '#pills-rebounding-tab'),
    ('general_offense_badge_count', 'generalOffenseBadgeCount', '#pills-genoffense-tab'),
    ('all_around_badge_count', 'allAroundBadgeCount', '#pills-allaround-tab'),
]

# (attribute, CSV column) in output order
CSV_COLUMNS: List[Tuple[str, str]] = (
    [
        ('name', 'name'),
        ('team', 'team'),
        ('position', 'position'),
        ('height', 'height'),
        ('overall_attribute', 'overallAttribute'),
    ]
    + [(attr, column) for attr, column, _ in SKILL_ATTRIBUTES]
    + BADGE_TIERS
    + [(attr, column) for attr, column, _ in BADGE_CATEGORIES]
)

TEXT_COLUMNS = frozenset(['name', 'team', 'position', 'height'])

UNKNOWN_NAME = 'Unknown'
NOT_AVAILABLE = 'N/A'


# ============================================================================
# DATA STRUCTURES
# ============================================================================

@dataclass(frozen=True)
class BestEffort:
    """A scraped value plus whether it came from the page or a fallback default"""
    value: Any
    defaulted: bool = False

    @classmethod
    def default(cls, value: Any) -> 'BestEffort':
        return cls(value, True)


@dataclass(frozen=True)
class Player:
    """Player ratings record for one NBA 2K player page"""
    name: str = UNKNOWN_NAME
    team: str = ''
    position: str = NOT_AVAILABLE
    height: str = NOT_AVAILABLE
    overall_attribute: int = 0

    # Outside scoring
    close_shot: int = 0
    mid_range_shot: int = 0
    three_point_shot: int = 0
    free_throw: int = 0
    shot_iq: int = 0
    offensive_consistency: int = 0

    # Athleticism
    speed: int = 0
    agility: int = 0
    strength: int = 0
    vertical: int = 0
    stamina: int = 0
    hustle: int = 0
    overall_durability: int = 0

    # Inside scoring
    layup: int = 0
    standing_dunk: int = 0
    driving_dunk: int = 0
    post_hook: int = 0
    post_fade: int = 0
    post_control: int = 0
    draw_foul: int = 0
    hands: int = 0

    # Playmaking
    pass_accuracy: int = 0
    ball_handle: int = 0
    speed_with_ball: int = 0
    pass_iq: int = 0
    pass_vision: int = 0

    # Defense
    interior_defense: int = 0
    perimeter_defense: int = 0
    steal: int = 0
    block: int = 0
    help_defense_iq: int = 0
    pass_perception: int = 0
    defensive_consistency: int = 0

    # Rebounding
    offensive_rebound: int = 0
    defensive_rebound: int = 0

    # Badge tiers
    legendary_badge_count: int = 0
    purple_badge_count: int = 0
    gold_badge_count: int = 0
    silver_badge_count: int = 0
    bronze_badge_count: int = 0
    badge_count: int = 0

    # Badge categories
    outside_scoring_badge_count: int = 0
    inside_scoring_badge_count: int = 0
    playmaking_badge_count: int = 0
    defensive_badge_count: int = 0
    rebounding_badge_count: int = 0
    general_offense_badge_count: int = 0
    all_around_badge_count: int = 0

    # CSV columns whose value is a fallback default (never written to CSV)
    defaulted_fields: FrozenSet[str] = field(default=frozenset(), compare=False, repr=False)

    @classmethod
    def from_extracted(cls, values: Dict[str, BestEffort]) -> 'Player':
        """Build a Player from per-attribute BestEffort values"""
        defaulted = frozenset(
            column for attr, column in CSV_COLUMNS
            if attr in values and values[attr].defaulted
        )
        kwargs = {attr: result.value for attr, result in values.items()}
        return cls(defaulted_fields=defaulted, **kwargs)

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> 'Player':
        """Build a Player from a CSV row keyed by column name"""
        kwargs = {}
        for attr, column in CSV_COLUMNS:
            if column not in row:
                continue
            raw = row[column]
            kwargs[attr] = raw if column in TEXT_COLUMNS else int(raw or 0)
        return cls(**kwargs)

    def is_defaulted(self, column: str) -> bool:
        """True when the column's value is a fallback rather than scraped"""
        return column in self.defaulted_fields

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for CSV output, keyed and ordered by column"""
        return {column: getattr(self, attr) for attr, column in CSV_COLUMNS}


# ============================================================================
# HTML DOCUMENT READER
# ============================================================================

class HtmlDocument:
    """Thin structural query layer over a parsed HTML page"""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html, 'html.parser')

    def select(self, selector: str, scope: Optional[Tag] = None) -> List[Tag]:
        """All elements matching selector in document order, optionally within scope"""
        return (scope if scope is not None else self.soup).select(selector)

    def select_one(self, selector: str, scope: Optional[Tag] = None) -> Optional[Tag]:
        return (scope if scope is not None else self.soup).select_one(selector)

    @staticmethod
    def text(element: Optional[Tag]) -> str:
        """Trimmed text content, empty when the element is missing"""
        return element.get_text().strip() if element is not None else ''

    @staticmethod
    def attr(element: Optional[Tag], name: str) -> Optional[str]:
        if element is None:
            return None
        value = element.get(name)
        if isinstance(value, list):
            value = ' '.join(value)
        return value

    @staticmethod
    def first_text(element: Optional[Tag]) -> Optional[str]:
        """
        Literal payload of the element's first child when that child is a text node

        Returns None when the element is missing, empty, or starts with a tag.
        """
        if element is None or not element.contents:
            return None
        first = element.contents[0]
        return str(first) if isinstance(first, NavigableString) else None

    @staticmethod
    def node_at_path(element: Optional[Tag], path: Sequence[int]):
        """
        Follow child-node indexes (text nodes included) down from element

        Returns None as soon as a step is missing.
        """
        node = element
        for index in path:
            if not isinstance(node, Tag) or index >= len(node.contents):
                return None
            node = node.contents[index]
        return node

    @classmethod
    def text_at_path(cls, element: Optional[Tag], path: Sequence[int]) -> Optional[str]:
        node = cls.node_at_path(element, path)
        return str(node) if isinstance(node, NavigableString) else None


# ============================================================================
# FIELD EXTRACTORS
# ============================================================================

LEADING_INT = re.compile(r'\s*(\d+)')
PARENTHESIZED_INT = re.compile(r'\((\d+)\)')


def parse_int(text: Optional[str]) -> Optional[int]:
    """
    Parse the leading run of digits, skipping leading whitespace

    '85' -> 85, ' 7 OVR' -> 7, '-3' -> None, 'abc' -> None
    """
    if not text:
        return None
    match = LEADING_INT.match(text)
    return int(match.group(1)) if match else None


class FieldExtractors:
    """Default-coercing extraction policy shared by all scraped fields"""

    @staticmethod
    def int_field(text: Optional[str]) -> BestEffort:
        value = parse_int(text)
        if value is None:
            return BestEffort.default(0)
        return BestEffort(value)

    @staticmethod
    def text_field(text: Optional[str], default: str) -> BestEffort:
        cleaned = text.strip() if text else ''
        if not cleaned:
            return BestEffort.default(default)
        return BestEffort(cleaned)

    @staticmethod
    def int_at(elements: Sequence[Tag], index: int) -> BestEffort:
        """Integer from the first text node of the index-th element"""
        if index >= len(elements):
            return BestEffort.default(0)
        return FieldExtractors.int_field(HtmlDocument.first_text(elements[index]))

    @staticmethod
    def badge_tab_count(text: Optional[str]) -> BestEffort:
        """Count from a badge tab label such as 'Defense (4)'"""
        match = PARENTHESIZED_INT.search(text or '')
        if not match:
            return BestEffort.default(0)
        return BestEffort(int(match.group(1)))

    @staticmethod
    def label_key(label: str) -> str:
        """Normalize an attribute label: 'Mid-Range Shot' -> 'midrangeshot'"""
        return re.sub(r'[^a-z0-9]', '', label.lower())

    @staticmethod
    def skill_label(box: Tag) -> str:
        """Text of the box's enclosing <li>, minus the rating inside the box"""
        item = box.find_parent('li')
        if item is None:
            return ''
        parts = []
        for text in item.find_all(string=True):
            if any(parent is box for parent in text.parents):
                continue
            if text.strip():
                parts.append(text.strip())
        return ' '.join(parts)


# ============================================================================
# URL BUILDER
# ============================================================================

class URLBuilder:
    """Build team roster URLs and resolve player links"""

    @staticmethod
    def build_team_url(base_url: str, team: str) -> str:
        """
        Team roster page URL

        Example:
            ('https://www.2kratings.com', 'miami-heat') → 'https://www.2kratings.com/teams/miami-heat'
        """
        return f"{base_url.rstrip('/')}/teams/{team}"

    @staticmethod
    def resolve_url(page_url: str, href: str) -> str:
        """
        Absolute URL for an href found on page_url

        Scheme, host and port come from page_url; paths without a leading
        slash resolve against the page's directory.

        Example:
            ('http://localhost:8000/teams/miami-heat', '/bam-adebayo') → 'http://localhost:8000/bam-adebayo'
        """
        return urljoin(page_url, href)

    @staticmethod
    def pretty_team_name(team: str) -> str:
        """'golden-state-warriors' → 'Golden State Warriors'"""
        return ' '.join(part[:1].upper() + part[1:] for part in team.split('-') if part)


# ============================================================================
# TEAM CONFIGURATION
# ============================================================================

class TeamConfig:
    """Fixed run configuration"""

    BASE_URL = 'https://www.2kratings.com'
    USER_AGENT = 'request'
    DEFAULT_OUTPUT = 'data/2kroster_latest.csv'
    DEFAULT_MAX_WORKERS = 8

    # Team slugs as used in {BASE_URL}/teams/{slug}
    CURRENT_TEAMS = [
        'atlanta-hawks',
        'boston-celtics',
        'brooklyn-nets',
        'charlotte-hornets',
        'chicago-bulls',
        'cleveland-cavaliers',
        'dallas-mavericks',
        'denver-nuggets',
        'detroit-pistons',
        'golden-state-warriors',
        'houston-rockets',
        'indiana-pacers',
        'los-angeles-clippers',
        'los-angeles-lakers',
        'memphis-grizzlies',
        'miami-heat',
        'milwaukee-bucks',
        'minnesota-timberwolves',
        'new-orleans-pelicans',
        'new-york-knicks',
        'oklahoma-city-thunder',
        'orlando-magic',
        'philadelphia-76ers',
        'phoenix-suns',
        'portland-trail-blazers',
        'sacramento-kings',
        'san-antonio-spurs',
        'toronto-raptors',
        'utah-jazz',
        'washington-wizards',
    ]

    @staticmethod
    def load_teams(csv_path: str) -> List[str]:
        """
        Load team slugs from a CSV with a 'team' column

        Args:
            csv_path: Path to the teams CSV

        Returns:
            Team slugs in file order, blanks skipped
        """
        teams = []
        # utf-8-sig drops a leading byte order mark
        with open(csv_path, 'r', newline='', encoding='utf-8-sig') as f:
            reader = csv.DictReader(f)
            for row in reader:
                team = (row.get('team') or '').strip()
                if team:
                    teams.append(team)

        logger.info(f"Loaded {len(teams)} teams from {csv_path}")
        return teams


# ============================================================================
# HTTP FETCHER
# ============================================================================

class PageFetcher:
    """GETs pages with the fixed User-Agent; errors propagate to the caller"""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        """
        Args:
            session: Optional requests Session for connection pooling
            timeout: Optional per-request timeout in seconds (None waits indefinitely)
        """
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = {
            'User-Agent': TeamConfig.USER_AGENT
        }

    def fetch(self, url: str) -> str:
        response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response.text


# ============================================================================
# SCRAPERS
# ============================================================================

class RosterScraper:
    """Collects player page URLs from a team roster page"""

    def __init__(self, fetcher: PageFetcher, base_url: str = TeamConfig.BASE_URL):
        self.fetcher = fetcher
        self.base_url = base_url

    def extract_roster(self, team: str) -> Optional[List[str]]:
        """
        Player detail URLs for one team, in roster table order

        Args:
            team: Team slug (e.g., 'miami-heat')

        Returns:
            List of absolute player URLs, or None when the page failed or listed nobody
        """
        team_url = URLBuilder.build_team_url(self.base_url, team)

        try:
            html = HtmlDocument(self.fetcher.fetch(team_url))
            player_urls = self._extract_player_urls(html, team_url)
        except requests.RequestException as e:
            logger.warning(f"Failed to fetch players for team {team}: {e}")
            return None
        except Exception as e:
            logger.warning(f"Failed to parse players for team {team}: {e}")
            return None

        if not player_urls:
            logger.warning(f"No player URLs found for team {team} ({team_url})")
            return None

        logger.debug(f"{team}: {len(player_urls)} player URLs")
        return player_urls

    def _extract_player_urls(self, html: HtmlDocument, team_url: str) -> List[str]:
        # The first <tbody> on the page is the roster table
        table = html.select_one('tbody')
        if table is None:
            return []

        player_urls = []
        for entry in html.select('.entry-font', scope=table):
            href = HtmlDocument.attr(html.select_one('a', scope=entry), 'href')
            if href:
                player_urls.append(URLBuilder.resolve_url(team_url, href))
        return player_urls


class PlayerScraper:
    """Extracts a Player record from a player detail page"""

    SKILL_SELECTOR = '.content .card .card-body .list-no-bullet li .attribute-box'
    OVERALL_SELECTOR = '.attribute-box-player'
    BADGE_TIER_SELECTOR = '.badge-count'
    HEADER_SELECTOR = '.header-subtitle'

    # Child-node paths from the header subtitle down to the value text
    POSITION_PATH = (4, 1, 0)
    HEIGHT_PATH = (6, 1, 0)

    def __init__(self, fetcher: PageFetcher):
        self.fetcher = fetcher

    def extract_player(self, team: str, player_url: str) -> Optional[Player]:
        """
        Scrape one player page

        Args:
            team: Human-readable team name stored on the record
            player_url: Absolute player page URL

        Returns:
            Player, or None when the page could not be fetched or parsed
        """
        try:
            html = HtmlDocument(self.fetcher.fetch(player_url))
            return self.parse_player(team, html)
        except requests.RequestException as e:
            logger.warning(f"Failed to fetch player at {player_url}: {e}")
            return None
        except Exception as e:
            logger.warning(f"Failed to parse player at {player_url}: {e}")
            return None

    def parse_player(self, team: str, html: HtmlDocument) -> Player:
        """Build a Player from a parsed page; missing elements fall back to defaults"""
        values: Dict[str, BestEffort] = {}

        values['name'] = FieldExtractors.text_field(HtmlDocument.text(html.select_one('h1')), UNKNOWN_NAME)
        values['team'] = BestEffort(team)
        values['overall_attribute'] = FieldExtractors.int_field(
            HtmlDocument.text(html.select_one(self.OVERALL_SELECTOR))
        )

        values.update(self._extract_skills(html))

        badges = html.select(self.BADGE_TIER_SELECTOR)
        for index, (attr, _) in enumerate(BADGE_TIERS):
            values[attr] = FieldExtractors.int_at(badges, index)

        for attr, _, selector in BADGE_CATEGORIES:
            tab = html.select_one(selector)
            values[attr] = FieldExtractors.badge_tab_count(tab.get_text() if tab is not None else None)

        header = html.select_one(self.HEADER_SELECTOR)
        values['position'] = FieldExtractors.text_field(
            HtmlDocument.text_at_path(header, self.POSITION_PATH), NOT_AVAILABLE
        )
        values['height'] = FieldExtractors.text_field(
            HtmlDocument.text_at_path(header, self.HEIGHT_PATH), NOT_AVAILABLE
        )

        return Player.from_extracted(values)

    def _extract_skills(self, html: HtmlDocument) -> Dict[str, BestEffort]:
        """
        Read the 35 skill ratings from the attribute list

        A box whose list item is labelled with the skill's name (e.g. 'Close Shot')
        is used for that skill. Skills without a labelled box fall back to the
        box at the skill's position in the list.
        """
        boxes = html.select(self.SKILL_SELECTOR)

        labelled: Dict[str, Tag] = {}
        for box in boxes:
            key = FieldExtractors.label_key(FieldExtractors.skill_label(box))
            if key:
                labelled.setdefault(key, box)

        skills = {}
        for index, (attr, _, label) in enumerate(SKILL_ATTRIBUTES):
            box = labelled.get(FieldExtractors.label_key(label))
            if box is None and index < len(boxes):
                box = boxes[index]
            skills[attr] = FieldExtractors.int_field(HtmlDocument.first_text(box))

        return skills


# ============================================================================
# CSV WRITER
# ============================================================================

def write_csv(players: Sequence[Player], path) -> Path:
    """
    Write players to a CSV file, replacing any previous file at path

    The file is written next to its destination and renamed into place, so
    readers never see a partial file.

    Args:
        players: Players in output row order
        path: Destination CSV path (parent directories are created)

    Returns:
        The destination Path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fieldnames = [column for _, column in CSV_COLUMNS]

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f'.{path.name}.', suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(player.to_dict() for player in players)
        # mkstemp creates the file 0600; give it the mode a plain open() would
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp_name, 0o666 & ~umask)
        os.replace(tmp_name, path)
    except Exception:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise

    return path


# ============================================================================
# ROSTER MANAGER
# ============================================================================

class RosterManager:
    """Runs the two-phase scrape (rosters, then players) with failure tracking"""

    def __init__(
        self,
        teams: Optional[List[str]] = None,
        base_url: str = TeamConfig.BASE_URL,
        output_path: str = TeamConfig.DEFAULT_OUTPUT,
        max_workers: int = TeamConfig.DEFAULT_MAX_WORKERS,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize RosterManager

        Args:
            teams: Team slugs in processing order (default: TeamConfig.CURRENT_TEAMS)
            base_url: Site root for team pages
            output_path: CSV destination
            max_workers: Upper bound on concurrent page fetches
            timeout: Optional per-request timeout in seconds
            session: Optional requests Session shared by all fetches
        """
        self.teams = list(teams) if teams is not None else list(TeamConfig.CURRENT_TEAMS)
        self.output_path = Path(output_path)
        self.max_workers = max_workers

        fetcher = PageFetcher(session=session, timeout=timeout)
        self.roster_scraper = RosterScraper(fetcher, base_url)
        self.player_scraper = PlayerScraper(fetcher)

        # Error tracking
        self.teams_without_roster: List[str] = []
        self.failed_players: List[str] = []

    def fetch_rosters(self) -> Dict[str, List[str]]:
        """
        Phase 1: player URLs for every team

        Returns:
            team slug → player URLs; teams whose roster failed are left out
        """
        logger.info("################ Fetching player URLs ... ################")

        roster = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results = executor.map(self.roster_scraper.extract_roster, self.teams)
            for team, player_urls in zip(self.teams, results):
                if player_urls:
                    roster[team] = player_urls
                else:
                    self.teams_without_roster.append(team)

        logger.info(f"Found rosters for {len(roster)}/{len(self.teams)} teams")
        return roster

    def fetch_players(self, roster: Dict[str, List[str]]) -> List[Player]:
        """
        Phase 2: player records, one team at a time in configured order

        Args:
            roster: Output of fetch_rosters

        Returns:
            Players grouped by team, each team in roster page order
        """
        logger.info("################ Fetching player details ... ################")

        players: List[Player] = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            for team in self.teams:
                player_urls = roster.get(team, [])
                team_name = URLBuilder.pretty_team_name(team)

                logger.info(f"---------- {team_name} ----------")

                extract = partial(self.player_scraper.extract_player, team_name)
                results = list(executor.map(extract, player_urls))

                for player_url, player in zip(player_urls, results):
                    if player is None:
                        self.failed_players.append(player_url)
                    else:
                        players.append(player)

        return players

    def run(self) -> List[Player]:
        roster = self.fetch_rosters()
        return self.fetch_players(roster)

    def save_results(self, players: List[Player]) -> Path:
        logger.info("################ Saving data to CSV ... ################")
        path = write_csv(players, self.output_path)
        logger.info(f"✓ Saved roster to {path} ({len(players)} players)")
        return path

    def log_summary(self, players: List[Player]):
        logger.info("=" * 80)
        logger.info("Scraping complete:")
        logger.info(f"  Players: {len(players)}")
        if self.teams_without_roster:
            logger.warning(f"  ⚠️  Teams without roster: {len(self.teams_without_roster)} "
                           f"({', '.join(self.teams_without_roster)})")
        if self.failed_players:
            logger.warning(f"  ⚠️  Failed player pages: {len(self.failed_players)}")
        logger.info("=" * 80)


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='NBA 2K Roster Scraper',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scrape every configured team
  python src/nba2k_roster_scraper.py

  # Scrape two teams only
  python src/nba2k_roster_scraper.py --team boston-celtics --team miami-heat

  # Gentler on the site
  python src/nba2k_roster_scraper.py --max-workers 2 --timeout 30
        """
    )

    parser.add_argument(
        '--team',
        action='append',
        default=[],
        help='Scrape only this team slug (repeatable)'
    )

    parser.add_argument(
        '--teams-csv',
        help='CSV with a "team" column of slugs to use instead of the built-in list'
    )

    parser.add_argument(
        '--base-url',
        default=TeamConfig.BASE_URL,
        help=f'Site root (default: {TeamConfig.BASE_URL})'
    )

    parser.add_argument(
        '--output',
        default=TeamConfig.DEFAULT_OUTPUT,
        help=f'Output CSV path (default: {TeamConfig.DEFAULT_OUTPUT})'
    )

    parser.add_argument(
        '--max-workers',
        type=int,
        default=TeamConfig.DEFAULT_MAX_WORKERS,
        help=f'Concurrent page fetches (default: {TeamConfig.DEFAULT_MAX_WORKERS})'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        help='Per-request timeout in seconds (default: none)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Debug logging'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.max_workers < 1:
        logger.error(f"--max-workers must be at least 1 (got {args.max_workers})")
        return 2

    teams = TeamConfig.load_teams(args.teams_csv) if args.teams_csv else list(TeamConfig.CURRENT_TEAMS)

    if args.team:
        unknown = [team for team in args.team if team not in teams]
        if unknown:
            logger.error(f"Unknown team(s): {', '.join(unknown)}")
            return 2
        teams = [team for team in teams if team in args.team]
        logger.info(f"Scraping specific teams: {', '.join(teams)}")

    if not teams:
        logger.error("No teams to scrape")
        return 2

    manager = RosterManager(
        teams=teams,
        base_url=args.base_url,
        output_path=args.output,
        max_workers=args.max_workers,
        timeout=args.timeout,
    )

    players = manager.run()
    manager.save_results(players)
    manager.log_summary(players)

    logger.info("Done!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
