"""Human-readable rendering of validation reports."""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from pathlib import Path
from typing import List

from swisspairing.exceptions import FileSaveException
from swisspairing.models.report import ValidationReport
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def format_validation_report(report: ValidationReport, tournament_name: str) -> str:
    """Render a report as text: header, failing rounds, then a per-round breakdown."""
    summary = report.summary
    lines: List[str] = [
        f"Validating {tournament_name}",
        f"Total Players: {report.total_players}",
        f"Expected Pairings per Round: {report.expected_pairings_per_round}",
        f"Total Rounds: {summary.total_rounds}",
        f"Total Pairings: {summary.total_pairings} (expected: {summary.total_expected_pairings})",
    ]

    if report.is_valid:
        lines.append("All pairings are valid!")
    else:
        lines.append("Pairing validation failed!")
        for round_validation in report.invalid_rounds:
            lines.append(f"Round {round_validation.round} issues:")
            lines.extend(f"  - {issue}" for issue in round_validation.issues)

    lines.append("Round-by-round breakdown:")
    for round_validation in report.rounds:
        status = "OK  " if round_validation.is_valid else "FAIL"
        lines.append(
            f"[{status}] Round {round_validation.round}: "
            f"{round_validation.actual_pairings}/{round_validation.expected_pairings} pairings, "
            f"{round_validation.actual_players}/{round_validation.expected_players} players"
        )
    return "\n".join(lines)


def log_validation(report: ValidationReport, tournament_name: str) -> None:
    """Log a report: summary at INFO, each failing round's issues at WARNING."""
    logger.info(
        "%s: %s rounds, %s/%s pairings, valid=%s",
        tournament_name,
        report.summary.total_rounds,
        report.summary.total_pairings,
        report.summary.total_expected_pairings,
        report.is_valid,
    )
    for round_validation in report.invalid_rounds:
        for issue in round_validation.issues:
            logger.warning("%s round %s: %s", tournament_name, round_validation.round, issue)


def save_report(report: ValidationReport, output_path: Path, pretty: bool = True) -> None:
    """Save report to JSON file.

    Raises:
        FileSaveException: If the file cannot be written
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2 if pretty else None, ensure_ascii=False)
    except OSError as e:
        raise FileSaveException(f"Could not write {output_path}: {e}") from e
    logger.info("Report saved to: %s", output_path)
