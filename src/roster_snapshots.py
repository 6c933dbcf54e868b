#!/usr/bin/env python3
"""
Dated roster snapshots

Reads the latest scraped roster CSV and writes sorted, date-stamped copies:
    data/2kroster_team_Mon Oct 19 2026.csv     (grouped by team, best first)
    data/2kroster_overall_Mon Oct 19 2026.csv  (whole league, best first)

Usage:
    python src/roster_snapshots.py
    python src/roster_snapshots.py --input data/2kroster_latest.csv --output-dir data/snapshots
"""

import csv
import sys
import argparse
import logging
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Sequence

from nba2k_roster_scraper import Player, TeamConfig, write_csv

logger = logging.getLogger(__name__)


def sort_players_by_team(players: Sequence[Player]) -> List[Player]:
    """Team name ascending, then overall rating descending within each team"""
    return sorted(players, key=lambda p: (p.team, -p.overall_attribute))


def sort_players_by_overall(players: Sequence[Player]) -> List[Player]:
    """Overall rating descending across the whole league"""
    return sorted(players, key=lambda p: -p.overall_attribute)


def snapshot_filename(suffix: str, today: date) -> str:
    # Date formatted like 'Mon Oct 19 2026'
    return f"2kroster_{suffix}_{today.strftime('%a %b %d %Y')}.csv"


def save_snapshot(players: Sequence[Player], suffix: str = 'team', output_dir: str = 'data',
                  today: Optional[date] = None) -> Path:
    """
    Write players to a CSV named after suffix and the date

    Args:
        players: Players in row order
        suffix: Label placed in the filename (e.g., 'team')
        output_dir: Directory for the snapshot
        today: Snapshot date (default: today)

    Returns:
        The written Path. A snapshot from earlier the same day is replaced.
    """
    today = today or date.today()
    path = write_csv(players, Path(output_dir) / snapshot_filename(suffix, today))
    logger.info(f"Saved {suffix} roster to disk: {path}")
    return path


def load_players(csv_file) -> List[Player]:
    """Read players back from a roster CSV written by the scraper"""
    with open(csv_file, 'r', newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        return [Player.from_row(row) for row in reader]


def save_snapshots(players: Sequence[Player], output_dir: str = 'data',
                   today: Optional[date] = None) -> List[Path]:
    """Write the team-grouped and league-wide snapshots"""
    return [
        save_snapshot(sort_players_by_team(players), 'team', output_dir, today),
        save_snapshot(sort_players_by_overall(players), 'overall', output_dir, today),
    ]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Write dated snapshots of the latest 2K roster CSV')
    parser.add_argument('--input', default=TeamConfig.DEFAULT_OUTPUT,
                        help=f'Roster CSV to snapshot (default: {TeamConfig.DEFAULT_OUTPUT})')
    parser.add_argument('--output-dir', default='data', help='Snapshot directory (default: data)')
    parser.add_argument('--date', help='Snapshot date as YYYY-MM-DD (default: today)')
    args = parser.parse_args(argv)

    if not Path(args.input).exists():
        logger.error(f"No roster CSV at {args.input} - run the scraper first")
        return 1

    today = datetime.strptime(args.date, '%Y-%m-%d').date() if args.date else None

    players = load_players(args.input)
    logger.info(f"Loaded {len(players)} players from {args.input}")
    save_snapshots(players, args.output_dir, today)
    return 0


if __name__ == '__main__':
    sys.exit(main())
